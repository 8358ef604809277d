"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Walk up the context chain for the --display value set by the root callback."""
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    result_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, YAML or JSON per --display)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from ctxpack.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx), result_printer)

    return wrapper  # type: ignore[return-value]
