"""Get Typer app factory."""

from typing import Annotated

import typer

from ctxpack.api.store.cmd_get import cmd_get
from ctxpack.cli._handle_stage_result import _handle_stage_result


def get() -> typer.Typer:
    """Create and configure the get Typer app."""
    app = typer.Typer(
        name="get",
        help="Fetch a chunk by id",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        chunk_id: Annotated[str | None, typer.Argument(help="Chunk id, e.g. lib:docs/intro.md#0")] = None,
    ) -> None:
        if not chunk_id:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)
        _handle_stage_result(cmd_get, ctx)(chunk_id)

    return app
