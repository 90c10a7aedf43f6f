"""The mcp-config.json file of installed servers."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from ...utils.get_logger import get_logger
from .AlwaysAllowRule import AlwaysAllowRule
from .InstalledServerConfig import InstalledServerConfig

logger = get_logger("servers.config")


class RegistryConfig(BaseModel):
    """Installed servers keyed by name plus the alwaysAllow rules.

    Server names are unique; storing a name again replaces the entry.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    servers: dict[str, InstalledServerConfig] = Field(default_factory=dict, alias="mcpServers")
    always_allow: list[AlwaysAllowRule] = Field(default_factory=list, alias="alwaysAllow")

    _load_error: str | None = PrivateAttr(default=None)

    @property
    def load_error(self) -> str | None:
        """Why an existing file was replaced by the empty default, if it was."""
        return self._load_error

    @staticmethod
    def _decode(path: Path) -> dict[str, Any]:
        """Parse the file as a JSON object.

        Raises:
            ValueError: If the file is not valid JSON or the top level is not an object
        """
        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: top level must be an object")
        return raw

    @classmethod
    def _validate(cls, path: Path, raw: dict[str, Any]) -> "RegistryConfig":
        """Build the model from a decoded file.

        Raises:
            ValueError: If mcpServers or alwaysAllow have the wrong shape
        """
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0] if e.errors() else {"msg": str(e), "loc": ()}
            field = ".".join(str(x) for x in first.get("loc", ()))
            detail = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
            raise ValueError(f"Invalid config in {path}: {detail}") from e

    @classmethod
    def read(cls, path: Path) -> "RegistryConfig":
        """Load the file, failing if it is missing or malformed.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or has the wrong shape
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found at {path}")
        return cls._validate(path, cls._decode(path))

    @classmethod
    def load(cls, path: Path) -> "RegistryConfig":
        """Load the file, or return an empty config if it is missing or not a JSON object.

        A JSON object whose mcpServers or alwaysAllow cannot be used is not
        replaced: that raises so the caller leaves the file alone.

        Raises:
            ValueError: If the file decodes but has the wrong shape
        """
        if not path.exists():
            return cls()
        try:
            raw = cls._decode(path)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            config = cls()
            config._load_error = str(e)
            return config
        return cls._validate(path, raw)

    def server_names(self) -> list[str]:
        return list(self.servers)

    def to_dict(self) -> dict[str, Any]:
        """Serialize in file layout: mcpServers, alwaysAllow, then any other keys."""
        return {
            "mcpServers": {name: server.to_dict() for name, server in self.servers.items()},
            "alwaysAllow": [rule.to_dict() for rule in self.always_allow],
            **(self.model_extra or {}),
        }

    def save(self, path: Path) -> None:
        """Write the file atomically (temp file, then rename), 2-space indented."""
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=2, ensure_ascii=False)
                fh.write("\n")
            temp_path.replace(path)
        except Exception as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
        logger.info("Saved %d server(s) to %s", len(self.servers), path)
