"""One entry of mcpServers in mcp-config.json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class InstalledServerConfig(BaseModel):
    """How the client launches one installed MCP server.

    Keys the client writes that are not modelled here are kept as extras so a
    load/save cycle never drops them. Values are taken as the client wrote
    them (a numeric argument or env value stays a number).
    """

    model_config = ConfigDict(extra="allow")

    type: Any = Field(default="local", description="Server kind")
    command: Any = Field(default="", description="Executable to run")
    args: list[Any] = Field(default_factory=list, description="Command arguments, in order")
    tools: list[Any] = Field(default_factory=list, description="Tools the client may use")
    env: dict[str, Any] | None = Field(default=None, description="Extra environment variables")

    def to_dict(self) -> dict[str, Any]:
        """Fields present in the file (or explicitly set), in JSON-ready form."""
        return self.model_dump(mode="json", exclude_unset=True)
