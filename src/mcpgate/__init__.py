from mcpgate.context import Connection, Notifier
from mcpgate.exceptions import InvalidParamsError, McpError, RegistryError
from mcpgate.rate import RateGate
from mcpgate.registry import PromptDefinition, Registry, ToolDefinition
from mcpgate.server import Server
from mcpgate.session import SessionInfo
from mcpgate.transport.stdio import run_stdio

__version__ = "0.1.0"

__all__ = [
    "Connection",
    "InvalidParamsError",
    "McpError",
    "Notifier",
    "PromptDefinition",
    "RateGate",
    "Registry",
    "RegistryError",
    "Server",
    "SessionInfo",
    "ToolDefinition",
    "run_stdio",
]
