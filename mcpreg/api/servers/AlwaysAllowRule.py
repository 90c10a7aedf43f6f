"""One entry of alwaysAllow in mcp-config.json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AlwaysAllowRule(BaseModel):
    """Permission grant tying one installed server to one tool."""

    model_config = ConfigDict(extra="allow")

    server: Any = Field(default=None, description="Installed server name")
    tool: Any = Field(default=None, description="Tool name")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)
