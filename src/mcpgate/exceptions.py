from mcpgate.types.json_rpc import INVALID_PARAMS, ErrorData


class McpError(Exception):
    """Exception raised by a request handler to reply with a JSON-RPC error.

    The dispatcher catches it and sends ``error`` back to the client as the
    error object of the response. The connection stays open, so the client may
    correct the request and retry.

    Attributes:
        error: The ErrorData sent to the peer, containing the error code,
               message, and optional additional data
    """

    error: ErrorData

    def __init__(self, error: ErrorData):
        """Initialize McpError with the error data to send to the peer.

        Args:
            error: ErrorData object containing the error details
        """
        super().__init__(error.message)
        self.error = error


class InvalidParamsError(McpError):
    """The request's params are malformed, name an unknown capability, or lack a required field."""

    def __init__(self, message: str = "Invalid params"):
        super().__init__(ErrorData(code=INVALID_PARAMS, message=message))


class RegistryError(ValueError):
    """A tool or prompt definition cannot be registered."""
