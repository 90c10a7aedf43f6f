"""Uninstall MCP server command."""

from collections.abc import Iterator

from ...constants import RESTART_NOTE
from ...utils.get_logger import get_logger
from .._output_schemas.servers import ServersUninstallOutput
from ..config.McpregConfig import McpregConfig
from ..StageResult import StageResult
from .locked_config import locked_config
from .uninstall_server import uninstall_server

logger = get_logger("servers.uninstall")


def cmd_uninstall(server_name: str, config: McpregConfig | None = None) -> StageResult:
    """Remove an MCP server from mcp-config.json.

    Also removes the alwaysAllow rules that name the server.

    Args:
        server_name: Name of the server as it appears in the config
        config: Configuration to use (loaded from MCPREG_HOME when omitted)

    Returns:
        StageResult with the removed configuration
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        config_path = ""
        available: list[str] = []
        try:
            yield (0.2, "Loading configuration...")
            cfg = config or McpregConfig.load()
            config_path = str(cfg.settings_path)

            yield (0.5, "Removing server...")
            with locked_config(cfg.settings_path, strict=True) as registry:
                available = registry.server_names()
                rules_before = len(registry.always_allow)
                removed = uninstall_server(registry, server_name)
                if removed is not None:
                    registry.save(cfg.settings_path)
                pruned = rules_before - len(registry.always_allow)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Uninstallation failed: {e}"
            result_obj.output = ServersUninstallOutput(
                success=False,
                errors=[str(e)],
                warnings=[],
                message=f'Uninstallation of "{server_name}" failed',
                name=server_name,
                config_path=config_path,
                removed_config={},
                pruned_rules=0,
                available_servers=available,
                note="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if removed is None:
            error = f'Server "{server_name}" not found in config'
            result_obj.result = error
            result_obj.output = ServersUninstallOutput(
                success=False,
                errors=[error],
                warnings=[],
                message=error,
                name=server_name,
                config_path=config_path,
                removed_config={},
                pruned_rules=0,
                available_servers=available,
                note="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        logger.info("Uninstalled %s (%d alwaysAllow rule(s) pruned)", server_name, pruned)
        message = f'Successfully uninstalled "{server_name}"'
        result_obj.result = message
        result_obj.output = ServersUninstallOutput(
            success=True,
            errors=[],
            warnings=[],
            message=message,
            name=server_name,
            config_path=config_path,
            removed_config=removed.to_dict(),
            pruned_rules=pruned,
            available_servers=[n for n in available if n != server_name],
            note=RESTART_NOTE,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Uninstalling MCP server '{server_name}'...",
        progress_callback=do_work,
    )
