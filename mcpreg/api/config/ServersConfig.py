"""Installed servers configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_SETTINGS_PATH
from ...utils.normalize_path import normalize_path


class ServersConfig(BaseModel):
    """Location of the mcp-config.json that install/uninstall edit."""

    model_config = ConfigDict(extra="forbid")

    settings_path: str = Field(
        default=DEFAULT_SETTINGS_PATH,
        validate_default=True,
        description="Path to the MCP servers JSON settings file",
    )

    @field_validator("settings_path")
    @classmethod
    def _normalize_settings_path(cls, v: str) -> str:
        return str(normalize_path(v))
