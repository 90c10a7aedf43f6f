"""Install MCP server command."""

from collections.abc import Iterator

from ...constants import RESTART_NOTE
from ...utils.get_logger import get_logger
from .._output_schemas.servers import ServersInstallOutput
from ..config.McpregConfig import McpregConfig
from ..registry.parse_github_url import parse_github_url
from ..StageResult import StageResult
from .install_server import install_server
from .locked_config import locked_config

logger = get_logger("servers.install")


def cmd_install(
    server_name: str,
    github_url: str,
    config_name: str | None = None,
    config: McpregConfig | None = None,
) -> StageResult:
    """Install an MCP server by adding it to mcp-config.json.

    Args:
        server_name: Server to install (e.g. "playwright", "github", "postgres")
        github_url: Repository URL (e.g. "https://github.com/microsoft/playwright-mcp")
        config_name: Name to store the server under (default: server_name)
        config: Configuration to use (loaded from MCPREG_HOME when omitted)

    Returns:
        StageResult with the stored server configuration
    """
    name = config_name or server_name

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        config_path = ""
        warnings: list[str] = []
        try:
            yield (0.2, "Loading configuration...")
            cfg = config or McpregConfig.load()
            config_path = str(cfg.settings_path)
            ref = parse_github_url(github_url)

            yield (0.5, "Updating MCP configuration...")
            with locked_config(cfg.settings_path) as registry:
                if registry.load_error:
                    warnings.append(f"Existing config could not be read and was replaced: {registry.load_error}")
                if name in registry.servers:
                    warnings.append(f'Replaced existing server "{name}"')
                server = install_server(registry, name, github_url)
                registry.save(cfg.settings_path)
        except Exception as e:
            yield (1.0, "Complete")
            logger.warning("Install of %s failed: %s", name, e)
            result_obj.result = f"Installation failed: {e}"
            result_obj.output = ServersInstallOutput(
                success=False,
                errors=[str(e)],
                warnings=warnings,
                message=f"Installation of {server_name} failed",
                name=name,
                config_path=config_path,
                server_config={},
                github="",
                note="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        logger.info("Installed %s as %s from %s", server_name, name, ref.full_name)
        message = f'Successfully installed {server_name} as "{name}"'
        result_obj.result = message
        result_obj.output = ServersInstallOutput(
            success=True,
            errors=[],
            warnings=warnings,
            message=message,
            name=name,
            config_path=config_path,
            server_config=server.to_dict(),
            github=ref.full_name,
            note=RESTART_NOTE,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Installing MCP server '{server_name}'...",
        progress_callback=do_work,
    )
