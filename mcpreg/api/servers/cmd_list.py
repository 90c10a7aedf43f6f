"""List installed MCP servers command."""

from collections.abc import Iterator

from .._output_schemas.servers import ServersListOutput
from ..config.McpregConfig import McpregConfig
from ..StageResult import StageResult
from .locked_config import locked_config


def cmd_list(config: McpregConfig | None = None) -> StageResult:
    """List all currently installed MCP servers from mcp-config.json.

    Returns:
        StageResult with the installed servers and alwaysAllow rules
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        config_path = ""
        try:
            yield (0.3, "Loading configuration...")
            cfg = config or McpregConfig.load()
            config_path = str(cfg.settings_path)
            with locked_config(cfg.settings_path, strict=True) as registry:
                servers = [
                    {
                        "name": name,
                        "type": server.type,
                        "command": server.command,
                        "args": list(server.args),
                        "tools": list(server.tools),
                        "env": dict(server.env or {}),
                    }
                    for name, server in registry.servers.items()
                ]
                rules = [rule.to_dict() for rule in registry.always_allow]
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Configuration error: {e}"
            result_obj.output = ServersListOutput(
                success=False,
                errors=[str(e)],
                warnings=[],
                config_path=config_path,
                total_installed=0,
                servers=[],
                alwaysAllow=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(servers)} installed server(s)"
        result_obj.output = ServersListOutput(
            success=True,
            errors=[],
            warnings=[],
            config_path=config_path,
            total_installed=len(servers),
            servers=servers,
            alwaysAllow=rules,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing installed MCP servers...",
        progress_callback=do_work,
    )
