"""Top-level mcpreg configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_config_path import get_config_path
from .ServersConfig import ServersConfig
from .SourceConfig import SourceConfig


class McpregConfig(BaseModel):
    """Top-level configuration for mcpreg."""

    model_config = ConfigDict(extra="forbid")

    source: SourceConfig = Field(default_factory=SourceConfig)
    servers: ServersConfig = Field(default_factory=ServersConfig)

    @property
    def settings_path(self) -> Path:
        """Path to the mcp-config.json this configuration manages."""
        return Path(self.servers.settings_path)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on MCPREG_HOME or default to ~/.mcpreg."""
        return get_config_path()

    @classmethod
    def load(cls) -> "McpregConfig":
        """Load and validate config from file.

        A missing file yields the defaults. MCPREG_SETTINGS_PATH, when set,
        overrides servers.settings_path.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        raw: dict[str, Any] = {}
        if path.exists():
            try:
                with path.open(encoding="utf-8") as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        settings_override = os.environ.get("MCPREG_SETTINGS_PATH")
        if settings_override:
            raw = {**raw, "servers": {**raw.get("servers", {}), "settings_path": settings_override}}

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
