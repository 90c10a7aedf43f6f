"""Registry Typer app factory."""

import typer

from ..api.registry.cmd_details import cmd_details
from ..api.registry.cmd_list import cmd_list
from ..api.registry.cmd_search import cmd_search
from ..constants import LIST_DEFAULT_LIMIT, SEARCH_DEFAULT_LIMIT
from ._handle_stage_result import _handle_stage_result


def registry() -> typer.Typer:
    """Create and configure the registry Typer app."""
    app = typer.Typer(
        name="registry",
        help="Search the MCP servers registry README",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Registry operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="search")
    def search_cmd(
        query: str = typer.Argument(..., help="Text to find in server names and descriptions"),
        limit: int = typer.Option(SEARCH_DEFAULT_LIMIT, "--limit", "-n", help="Maximum results (max 50)"),
        category: str = typer.Option("all", "--category", "-c", help="official, community or all"),
    ) -> None:
        """Search registry servers by name and description."""
        _handle_stage_result(cmd_search)(query, limit, category)

    @app.command(name="list")
    def list_cmd(
        limit: int = typer.Option(LIST_DEFAULT_LIMIT, "--limit", "-n", help="Page size (max 100)"),
        offset: int = typer.Option(0, "--offset", help="Servers to skip"),
        category: str = typer.Option("all", "--category", "-c", help="official, community or all"),
    ) -> None:
        """List registry servers one page at a time."""
        _handle_stage_result(cmd_list)(limit, offset, category)

    @app.command(name="details")
    def details_cmd(
        github_url: str = typer.Argument(..., help="GitHub URL of the server"),
    ) -> None:
        """Show GitHub metadata and README preview for a server."""
        _handle_stage_result(cmd_details)(github_url)

    return app
