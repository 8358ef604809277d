"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable

from ctxpack.cli.display.CLIDisplay import CLIDisplay


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once and display result.

    Commands must handle their own domain errors and report them through
    their output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.info(f"[dim]{CLIDisplay._timestamp()}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if result_printer:
        result_printer(result.output)
    else:
        display.json_output(result.output, output_format=display_format)

    sys.exit(0 if result.success else 1)
