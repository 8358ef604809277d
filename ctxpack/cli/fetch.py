"""Fetch Typer app factory."""

from typing import Annotated

import typer

from ctxpack.api.manifest.cmd_fetch import cmd_fetch
from ctxpack.cli._handle_stage_result import _handle_stage_result


def fetch() -> typer.Typer:
    """Create and configure the fetch Typer app."""
    app = typer.Typer(
        name="fetch",
        help="Download, verify and unpack published indexes",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        repos: Annotated[list[str] | None, typer.Argument(help="Repos to install (all if omitted)")] = None,
        output: Annotated[str, typer.Option("--output", "-o", help="Destination directory")] = "",
    ) -> None:
        _handle_stage_result(cmd_fetch, ctx)(repos=list(repos or []), output=output)

    return app
