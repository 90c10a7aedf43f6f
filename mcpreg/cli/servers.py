"""Installed servers Typer app factory."""

import typer

from ..api.servers.cmd_backup import cmd_backup
from ..api.servers.cmd_install import cmd_install
from ..api.servers.cmd_list import cmd_list
from ..api.servers.cmd_uninstall import cmd_uninstall
from ..api.servers.cmd_update import cmd_update
from ._handle_stage_result import _handle_stage_result


def servers() -> typer.Typer:
    """Create and configure the servers Typer app."""
    app = typer.Typer(
        name="servers",
        help="Manage servers installed in mcp-config.json",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Installed server operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd(
        server_name: str = typer.Argument(..., help="Server to install (e.g. playwright)"),
        github_url: str = typer.Argument(..., help="GitHub URL of the server"),
        config_name: str | None = typer.Option(None, "--as", help="Name to store the server under"),
    ) -> None:
        """Add a server to mcp-config.json."""
        _handle_stage_result(cmd_install)(server_name, github_url, config_name)

    @app.command(name="uninstall")
    def uninstall_cmd(
        server_name: str = typer.Argument(..., help="Server name as it appears in the config"),
    ) -> None:
        """Remove a server and its alwaysAllow rules."""
        _handle_stage_result(cmd_uninstall)(server_name)

    @app.command(name="list")
    def list_cmd() -> None:
        """List installed servers."""
        _handle_stage_result(cmd_list)()

    @app.command(name="update")
    def update_cmd(
        server_name: str = typer.Argument(..., help="Server name as it appears in the config"),
        args: list[str] | None = typer.Option(None, "--arg", help="Replacement argument (repeatable)"),
        tools: list[str] | None = typer.Option(None, "--tool", help="Replacement tool (repeatable)"),
        clear_args: bool = typer.Option(False, "--clear-args", help="Set args to an empty list"),
        clear_tools: bool = typer.Option(False, "--clear-tools", help="Set tools to an empty list"),
    ) -> None:
        """Replace the args and/or tools of an installed server."""
        new_args = list(args) if args else ([] if clear_args else None)
        new_tools = list(tools) if tools else ([] if clear_tools else None)
        _handle_stage_result(cmd_update)(server_name, new_args, new_tools)

    @app.command(name="backup")
    def backup_cmd() -> None:
        """Write a timestamped copy of mcp-config.json next to it."""
        _handle_stage_result(cmd_backup)()

    return app
