"""Update MCP server configuration command."""

from collections.abc import Iterator

from ...constants import RESTART_NOTE
from .._output_schemas.servers import ServersUpdateOutput
from ..config.McpregConfig import McpregConfig
from ..StageResult import StageResult
from .locked_config import locked_config
from .update_server import update_server


def cmd_update(
    server_name: str,
    new_args: list[str] | None = None,
    new_tools: list[str] | None = None,
    config: McpregConfig | None = None,
) -> StageResult:
    """Update the args and/or tools of an installed MCP server.

    Args:
        server_name: Name of the server to update
        new_args: Replacement command arguments (unchanged when omitted)
        new_tools: Replacement tools list (unchanged when omitted)
        config: Configuration to use (loaded from MCPREG_HOME when omitted)

    Returns:
        StageResult with the old and new server configuration
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        config_path = ""
        available: list[str] = []
        try:
            yield (0.2, "Loading configuration...")
            cfg = config or McpregConfig.load()
            config_path = str(cfg.settings_path)

            yield (0.5, "Updating server...")
            with locked_config(cfg.settings_path, strict=True) as registry:
                available = registry.server_names()
                changed = update_server(registry, server_name, new_args, new_tools)
                if changed is not None:
                    registry.save(cfg.settings_path)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Update failed: {e}"
            result_obj.output = ServersUpdateOutput(
                success=False,
                errors=[str(e)],
                warnings=[],
                message=f'Update of "{server_name}" failed',
                name=server_name,
                config_path=config_path,
                old_config={},
                new_config={},
                available_servers=available,
                note="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if changed is None:
            error = f'Server "{server_name}" not found in config'
            result_obj.result = error
            result_obj.output = ServersUpdateOutput(
                success=False,
                errors=[error],
                warnings=[],
                message=error,
                name=server_name,
                config_path=config_path,
                old_config={},
                new_config={},
                available_servers=available,
                note="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        old, new = changed
        message = f'Successfully updated "{server_name}"'
        result_obj.result = message
        result_obj.output = ServersUpdateOutput(
            success=True,
            errors=[],
            warnings=[] if new_args is not None or new_tools is not None else ["No changes requested"],
            message=message,
            name=server_name,
            config_path=config_path,
            old_config=old.to_dict(),
            new_config=new.to_dict(),
            available_servers=available,
            note=RESTART_NOTE,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Updating MCP server '{server_name}'...",
        progress_callback=do_work,
    )
