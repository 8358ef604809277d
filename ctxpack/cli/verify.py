"""Verify Typer app factory."""

from typing import Annotated

import typer

from ctxpack.api.manifest.cmd_verify import cmd_verify
from ctxpack.cli._handle_stage_result import _handle_stage_result


def verify() -> typer.Typer:
    """Create and configure the verify Typer app."""
    app = typer.Typer(
        name="verify",
        help="Check installed indexes against the release manifest",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        output: Annotated[str, typer.Option("--output", "-o", help="Directory to verify")] = "",
    ) -> None:
        _handle_stage_result(cmd_verify, ctx)(output=output)

    return app
