import pytest
from pydantic import ValidationError

from mcpgate.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir("/")
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.server_name == "ExampleServer"
    assert settings.server_version == "1.0.0"
    assert (settings.tool_rate, settings.tool_burst) == (10.0, 1)
    assert (settings.prompt_rate, settings.prompt_burst) == (1.0, 5)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MCPGATE_SERVER_NAME", "FromEnv")
    monkeypatch.setenv("MCPGATE_TOOL_RATE", "inf")
    monkeypatch.setenv("MCPGATE_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.server_name == "FromEnv"
    assert settings.tool_rate == float("inf")
    assert settings.log_level == "DEBUG"


def test_init_arguments_win_over_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MCPGATE_SERVER_NAME", "FromEnv")

    assert Settings(server_name="FromInit").server_name == "FromInit"


def test_negative_burst_is_rejected():
    with pytest.raises(ValidationError):
        Settings(tool_burst=-1)
