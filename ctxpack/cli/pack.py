"""Pack Typer app factory."""

from typing import Annotated

import typer

from ctxpack.api.manifest.cmd_pack import cmd_pack
from ctxpack.cli._handle_stage_result import _handle_stage_result


def pack() -> typer.Typer:
    """Create and configure the pack Typer app."""
    app = typer.Typer(
        name="pack",
        help="Compress store files and write the release manifest",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        dim: Annotated[int | None, typer.Option("--dim", help="Embedding dimension to record")] = None,
        model: Annotated[str, typer.Option("--model", help="Embedding model to record")] = "",
    ) -> None:
        _handle_stage_result(cmd_pack, ctx)(dim=dim, model=model)

    return app
