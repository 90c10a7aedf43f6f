"""MCP Typer app factory."""

import typer

from ..mcp.main import main as mcp_main


def mcp() -> typer.Typer:
    """Create and configure the MCP Typer app."""
    app = typer.Typer(
        name="mcp",
        help="MCP server",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """MCP operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="run")
    def run_cmd() -> None:
        """Run the MCP server over stdio."""
        raise typer.Exit(mcp_main())

    return app
