"""Config Typer app factory."""

import typer

from ..api.config.cmd_show import cmd_show
from ..api.config.cmd_version import cmd_version
from ._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration management",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show the effective configuration when no subcommand is given."""
        if ctx.invoked_subcommand is None:
            _handle_stage_result(cmd_show)()

    @app.command(name="show")
    def show_cmd() -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show)()

    @app.command(name="version")
    def version_cmd() -> None:
        """Show the mcpreg version."""
        _handle_stage_result(cmd_version)()

    return app
