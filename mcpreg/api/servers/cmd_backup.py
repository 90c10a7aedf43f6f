"""Backup mcp-config.json command."""

from collections.abc import Iterator

from .._output_schemas.servers import ServersBackupOutput
from ..config.McpregConfig import McpregConfig
from ..StageResult import StageResult
from .backup_config import backup_config
from .locked_config import WRITE_LOCK


def cmd_backup(config: McpregConfig | None = None) -> StageResult:
    """Create a timestamped backup of mcp-config.json.

    Returns:
        StageResult with the backup path
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        config_path = ""
        try:
            yield (0.3, "Loading configuration...")
            cfg = config or McpregConfig.load()
            config_path = str(cfg.settings_path)

            yield (0.6, "Copying config...")
            with WRITE_LOCK:
                backup_path, timestamp = backup_config(cfg.settings_path)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Backup failed: {e}"
            result_obj.output = ServersBackupOutput(
                success=False,
                errors=[str(e)],
                warnings=[],
                message="Config backup failed",
                original_path=config_path,
                backup_path="",
                timestamp="",
                note="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Config backup created at {backup_path}"
        result_obj.output = ServersBackupOutput(
            success=True,
            errors=[],
            warnings=[],
            message="Config backup created successfully",
            original_path=config_path,
            backup_path=str(backup_path),
            timestamp=timestamp,
            note="To restore, copy this backup file over the original config",
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Backing up MCP config...",
        progress_callback=do_work,
    )
