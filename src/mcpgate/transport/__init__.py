from mcpgate.transport.sink import StreamConnection
from mcpgate.transport.stdio import run_stdio

__all__ = ["StreamConnection", "run_stdio"]
