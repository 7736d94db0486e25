import json

from click.testing import CliRunner

from mcpgate.cli import main


def test_serves_stdio_until_eof():
    runner = CliRunner()
    requests = [
        {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}},
        {"jsonrpc": "2.0", "id": 2, "method": "ping"},
    ]

    result = runner.invoke(
        main,
        ["--name", "CliServer", "--version-string", "2.0.0", "--log-level", "warning"],
        input="".join(json.dumps(request) + "\n" for request in requests),
    )

    assert result.exit_code == 0, result.output
    replies = [json.loads(line) for line in result.stdout.splitlines()]
    assert replies[0]["result"]["serverInfo"] == {"name": "CliServer", "version": "2.0.0"}
    assert replies[1] == {"jsonrpc": "2.0", "id": 2, "result": {}}


def test_rejects_unknown_log_level():
    result = CliRunner().invoke(main, ["--log-level", "LOUD"])

    assert result.exit_code == 2
