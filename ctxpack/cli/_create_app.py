"""Create the main Typer CLI app."""

import typer

from ctxpack.cli.brief import brief
from ctxpack.cli.fetch import fetch
from ctxpack.cli.get import get
from ctxpack.cli.pack import pack
from ctxpack.cli.search import search
from ctxpack.cli.verify import verify


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="ctxpack CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(fetch(), name="fetch")
    app.add_typer(verify(), name="verify")
    app.add_typer(pack(), name="pack")
    app.add_typer(search(), name="search")
    app.add_typer(get(), name="get")
    app.add_typer(brief(), name="brief")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
