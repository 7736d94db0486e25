"""Settings for the example server."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mcpgate.utilities.logging import LogLevel


class Settings(BaseSettings):
    """mcpgate server settings.

    All settings can be configured via environment variables with the prefix MCPGATE_.
    For example, MCPGATE_LOG_LEVEL=DEBUG will set log_level="DEBUG".
    """

    model_config = SettingsConfigDict(
        env_prefix="MCPGATE_",
        env_file=".env",
        extra="ignore",
    )

    log_level: LogLevel = "INFO"

    # Server identity, reported as serverInfo
    server_name: str = "ExampleServer"
    server_version: str = "1.0.0"

    # sha256sum tool admission
    tool_rate: Annotated[float, Field(ge=0)] = 10.0
    """Tokens per second; inf disables the limit."""
    tool_burst: Annotated[int, Field(ge=0)] = 1

    # example prompt admission
    prompt_rate: Annotated[float, Field(ge=0)] = 1.0
    prompt_burst: Annotated[int, Field(ge=0)] = 5
