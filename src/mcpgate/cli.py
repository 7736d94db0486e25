"""Command line entry point: run the example server over stdio."""

from __future__ import annotations

import anyio
import click

from mcpgate.example import build_server
from mcpgate.settings import Settings
from mcpgate.transport.stdio import run_stdio
from mcpgate.utilities.logging import configure_logging


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Log level for messages written to stderr",
)
@click.option("--name", default=None, help="Server name reported to clients")
@click.option("--version-string", default=None, help="Server version reported to clients")
def main(log_level: str | None, name: str | None, version_string: str | None) -> int:
    overrides: dict[str, str] = {}
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if name is not None:
        overrides["server_name"] = name
    if version_string is not None:
        overrides["server_version"] = version_string
    settings = Settings(**overrides)

    configure_logging(settings.log_level)
    server = build_server(settings)

    async def arun():
        await run_stdio(server)

    anyio.run(arun)
    return 0
