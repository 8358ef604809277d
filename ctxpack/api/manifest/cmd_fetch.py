"""Fetch command - install published index files."""

from collections.abc import Iterator

from ...utils.expand_path import expand_path
from ...utils.logger import get_logger
from .._output_schemas.manifest import ManifestFetchOutput
from ..config.load_config_with_output import load_config_with_output
from ..errors.CtxpackError import CtxpackError
from ..logger.PythonLogger import PythonLogger
from ..logger.RecordingLogger import RecordingLogger
from ..StageResult import StageResult
from .fetch_indexes import fetch_indexes


def cmd_fetch(repos: list[str] | None = None, output: str = "") -> StageResult:
    """Download, verify and unpack the configured release.

    Args:
        repos: Only install these repos (all when empty)
        output: Destination directory (defaults to store.base_dir)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(ManifestFetchOutput, destination=output)
        if config is None:
            result_obj.result = "Failed to load configuration"
            result_obj.output = error_output or {}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        destination = expand_path(output) if output else config.store.path
        recorder = RecordingLogger(forward=PythonLogger(get_logger("fetch")))

        yield (0.3, f"Fetching release {config.release.version}...")
        try:
            state = fetch_indexes(config.release, destination, repos, recorder)
        except (CtxpackError, OSError) as e:
            result_obj.result = f"Fetch failed: {e}"
            result_obj.output = ManifestFetchOutput(
                errors=[str(e)],
                warnings=recorder.messages("warning"),
                destination=str(destination),
                messages=recorder.messages(),
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (1.0, "Complete")
        result_obj.result = f"Indexes installed for {state.version} in {destination}"
        result_obj.output = ManifestFetchOutput(
            errors=[],
            warnings=recorder.messages("warning"),
            destination=str(destination),
            version=state.version,
            installed_at=state.installed_at,
            messages=recorder.messages(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Fetching indexes...",
        progress_callback=do_work,
    )
