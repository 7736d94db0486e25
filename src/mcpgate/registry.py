"""Capability registry - the tools and prompts a server exposes.

A Registry is built once from a sequence of definitions and is read-only
afterwards. It keeps two views of every capability kind: a name lookup used
when a call comes in, and the metadata list in registration order used to
answer tools/list and prompts/list.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from mcpgate.exceptions import RegistryError
from mcpgate.rate import RateGate
from mcpgate.types.prompts import GetPromptRequestParams, GetPromptResult, Prompt
from mcpgate.types.tools import CallToolRequestParams, CallToolResult, Tool

if TYPE_CHECKING:
    from mcpgate.context import Notifier

logger = logging.getLogger(__name__)

ToolExecutor = Callable[["Notifier", CallToolRequestParams], Awaitable[CallToolResult]]
PromptProcessor = Callable[["Notifier", GetPromptRequestParams], Awaitable[GetPromptResult]]


@dataclass(frozen=True)
class ToolDefinition:
    """A tool's metadata, the coroutine that runs it, and its rate gate.

    ``execute`` receives the request's Notifier and the parsed call params.
    Raising any exception reports an application error to the client.
    """

    tool: Tool
    execute: ToolExecutor
    rate_gate: RateGate = field(default_factory=RateGate.unlimited)

    @property
    def name(self) -> str:
        return self.tool.name


@dataclass(frozen=True)
class PromptDefinition:
    """A prompt's metadata, the coroutine that renders it, and its rate gate."""

    prompt: Prompt
    process: PromptProcessor
    rate_gate: RateGate = field(default_factory=RateGate.unlimited)

    @property
    def name(self) -> str:
        return self.prompt.name


def _index(kind: str, definitions: Iterable[ToolDefinition] | Iterable[PromptDefinition]) -> dict[str, Any]:
    by_name: dict[str, Any] = {}
    for definition in definitions:
        if not definition.name:
            raise RegistryError(f"{kind} name must not be empty")
        if definition.name in by_name:
            logger.warning("Duplicate %s name %r; the later definition replaces the earlier one", kind, definition.name)
        by_name[definition.name] = definition
    return by_name


class Registry:
    """Immutable collection of tool and prompt definitions.

    Example:
        registry = Registry(
            tools=[ToolDefinition(tool=Tool(...), execute=run_tool, rate_gate=RateGate(10, 1))],
            prompts=[PromptDefinition(prompt=Prompt(...), process=render)],
        )
    """

    def __init__(
        self,
        tools: Iterable[ToolDefinition] = (),
        prompts: Iterable[PromptDefinition] = (),
    ) -> None:
        tools = tuple(tools)
        prompts = tuple(prompts)
        self._tools: Mapping[str, ToolDefinition] = MappingProxyType(_index("tool", tools))
        self._prompts: Mapping[str, PromptDefinition] = MappingProxyType(_index("prompt", prompts))
        # Listing keeps every registration, duplicates included, in the order given.
        self._tool_list: tuple[Tool, ...] = tuple(d.tool for d in tools)
        self._prompt_list: tuple[Prompt, ...] = tuple(d.prompt for d in prompts)
        logger.info("Registry built with %d tool(s) and %d prompt(s)", len(self._tools), len(self._prompts))

    def get_tool(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def get_prompt(self, name: str) -> PromptDefinition | None:
        return self._prompts.get(name)

    @property
    def tools(self) -> list[Tool]:
        """Tool metadata in registration order."""
        return list(self._tool_list)

    @property
    def prompts(self) -> list[Prompt]:
        """Prompt metadata in registration order."""
        return list(self._prompt_list)

    @property
    def has_prompts(self) -> bool:
        return bool(self._prompts)

    def __repr__(self) -> str:
        return f"Registry(tools={list(self._tools)!r}, prompts={list(self._prompts)!r})"
