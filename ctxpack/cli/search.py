"""Search Typer app factory."""

from typing import Annotated

import typer

from ctxpack.api.store.cmd_search import cmd_search
from ctxpack.cli._handle_stage_result import _handle_stage_result


def search() -> typer.Typer:
    """Create and configure the search Typer app."""
    app = typer.Typer(
        name="search",
        help="Semantic search over the local store",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        query: Annotated[str | None, typer.Argument(help="Search query")] = None,
        repo: Annotated[str, typer.Option("--repo", "-r", help="Only search this repo")] = "",
        k: Annotated[int, typer.Option("--top", "-k", help="Number of results")] = 6,
        must_only: Annotated[bool, typer.Option("--must-only", help="Only MUST rules")] = False,
        section: Annotated[str, typer.Option("--section", "-s", help="Only chunks under this heading")] = "",
    ) -> None:
        if query is None or not query.strip():
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)
        _handle_stage_result(cmd_search, ctx)(query, repo=repo, k=k, must_only=must_only, section=section)

    return app
