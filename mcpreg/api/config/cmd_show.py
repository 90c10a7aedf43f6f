"""Show command - returns the effective mcpreg configuration."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .McpregConfig import McpregConfig


def cmd_show() -> StageResult:
    """Show the effective configuration.

    Returns:
        StageResult with the configuration and the file it was read from
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.3, "Loading configuration...")
        config_path = McpregConfig.get_config_path()
        try:
            config = McpregConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = ConfigShowOutput(
                success=False,
                errors=[str(e)],
                warnings=[],
                config_path=str(config_path),
                exists=config_path.exists(),
                content={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        exists = config_path.exists()
        result_obj.result = f"Configuration from {config_path}" if exists else "Using default configuration"
        result_obj.output = ConfigShowOutput(
            success=True,
            errors=[],
            warnings=[] if exists else [f"Configuration file not found at {config_path}, using defaults"],
            config_path=str(config_path),
            exists=exists,
            content=config.model_dump(mode="json"),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
