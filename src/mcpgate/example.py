"""Example server: a SHA-256 checksum tool and a text-processing prompt."""

from __future__ import annotations

import hashlib
import logging

from mcpgate.context import Notifier
from mcpgate.rate import RateGate
from mcpgate.registry import PromptDefinition, Registry, ToolDefinition
from mcpgate.server import Server
from mcpgate.settings import Settings
from mcpgate.types import (
    CallToolRequestParams,
    CallToolResult,
    GetPromptRequestParams,
    GetPromptResult,
    Implementation,
    JsonSchema,
    Prompt,
    PromptArgument,
    PromptMessage,
    TextContent,
    Tool,
)

logger = logging.getLogger(__name__)

PROCESSING_NOTIFICATION = "test/notification"


async def compute_sha256(notifier: Notifier, params: CallToolRequestParams) -> CallToolResult:
    text = (params.arguments or {}).get("text")
    if not isinstance(text, str):
        raise TypeError("failed to compute checksum: text must be a string")
    if not text:
        raise ValueError("failed to compute checksum: text cannot be empty")

    await notifier.notify(PROCESSING_NOTIFICATION, {"message": "Processing text"})

    checksum = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return CallToolResult(content=[TextContent(text=checksum)], is_error=False)


async def process_prompt(notifier: Notifier, params: GetPromptRequestParams) -> GetPromptResult:
    text = (params.arguments or {}).get("text", "")
    if not text:
        raise ValueError("input text cannot be empty")

    await notifier.notify(PROCESSING_NOTIFICATION, {"message": "Processing text"})

    return GetPromptResult(
        messages=[PromptMessage(role="assistant", content=TextContent(text=f"Processed: {text}"))],
    )


SHA256SUM_TOOL = Tool(
    name="sha256sum",
    description="Compute a SHA-256 checksum",
    input_schema=JsonSchema(
        properties={
            "text": {
                "type": "string",
                "description": "Text to compute a checksum for",
            },
        },
        required=["text"],
    ),
)

EXAMPLE_PROMPT = Prompt(
    name="example",
    description="An example prompt template",
    arguments=[PromptArgument(name="text", description="Text to process", required=True)],
)


def build_registry(settings: Settings) -> Registry:
    return Registry(
        tools=[
            ToolDefinition(
                tool=SHA256SUM_TOOL,
                execute=compute_sha256,
                rate_gate=RateGate(rate=settings.tool_rate, burst=settings.tool_burst),
            ),
        ],
        prompts=[
            PromptDefinition(
                prompt=EXAMPLE_PROMPT,
                process=process_prompt,
                rate_gate=RateGate(rate=settings.prompt_rate, burst=settings.prompt_burst),
            ),
        ],
    )


def build_server(settings: Settings | None = None) -> Server:
    """Build the example server from ``settings`` (environment defaults when omitted)."""
    settings = settings or Settings()
    server_info = Implementation(name=settings.server_name, version=settings.server_version)
    logger.debug("Building %s %s", server_info.name, server_info.version)
    return Server(server_info, build_registry(settings))
