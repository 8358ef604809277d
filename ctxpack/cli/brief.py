"""Brief Typer app factory."""

from typing import Annotated

import typer

from ctxpack.api.store.cmd_brief import cmd_brief
from ctxpack.cli._handle_stage_result import _handle_stage_result


def _print_markdown(output: dict) -> None:
    typer.echo(output.get("brief") or "")


def brief() -> typer.Typer:
    """Create and configure the brief Typer app."""
    app = typer.Typer(
        name="brief",
        help="Assemble a task brief from the top hits of each repo",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        task: Annotated[str | None, typer.Argument(help="Task description")] = None,
        repos: Annotated[list[str] | None, typer.Option("--repo", "-r", help="Repo to include (repeatable)")] = None,
        markdown: Annotated[bool, typer.Option("--markdown", "-m", help="Print only the markdown brief")] = False,
    ) -> None:
        if task is None or not task.strip():
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)
        printer = _print_markdown if markdown else None
        _handle_stage_result(cmd_brief, ctx, result_printer=printer)(task, repos=list(repos or []))

    return app
