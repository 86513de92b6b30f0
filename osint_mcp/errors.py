"""Error taxonomy for the OSINT MCP server.

Every failure a tool call can produce is one of these.  The transport
layer turns them into in-band ``Error: …`` results; callers and tests can
tell them apart by class or by ``kind`` without parsing text.
"""


class OsintMcpError(Exception):
    """Base for all tool-call failures."""

    kind = "error"

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)
        self.message = message


class UnknownToolError(OsintMcpError):
    """No tool is registered under the requested name."""

    kind = "unknown_tool"

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidArgumentsError(OsintMcpError):
    """The argument bag does not match the tool's declared input schema."""

    kind = "invalid_arguments"

    def __init__(self, tool_name: str, errors: list[str]):
        super().__init__(f"Invalid arguments for {tool_name}: {'; '.join(errors)}")
        self.tool_name = tool_name
        self.errors = errors


class ApiError(OsintMcpError):
    """The platform API answered with a non-2xx status."""

    kind = "api"

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API Error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class NetworkError(OsintMcpError):
    """The request never produced a response (connection refused, timeout…)."""

    kind = "network"

    def __init__(self, cause: Exception):
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause
