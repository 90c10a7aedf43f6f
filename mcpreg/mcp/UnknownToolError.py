"""Raised for a tool name the server does not define."""


class UnknownToolError(LookupError):
    """The requested tool does not exist."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name
