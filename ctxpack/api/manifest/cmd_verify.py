"""Verify command - check installed index files against the manifest."""

from collections.abc import Iterator

from ...utils.expand_path import expand_path
from ...utils.logger import get_logger
from .._output_schemas.manifest import ManifestVerifyOutput
from ..config.load_config_with_output import load_config_with_output
from ..logger.PythonLogger import PythonLogger
from ..logger.RecordingLogger import RecordingLogger
from ..StageResult import StageResult
from .read_install_state import read_install_state
from .verify_indexes import verify_indexes


def cmd_verify(output: str = "") -> StageResult:
    """Verify installed index files without modifying them."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(ManifestVerifyOutput, destination=output)
        if config is None:
            result_obj.result = "Failed to load configuration"
            result_obj.output = error_output or {}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        destination = expand_path(output) if output else config.store.path
        recorder = RecordingLogger(forward=PythonLogger(get_logger("verify")))

        yield (0.4, f"Verifying {destination}...")
        verified = verify_indexes(config.release, destination, recorder)
        state = read_install_state(destination)

        yield (1.0, "Complete")
        result_obj.result = "All files verified" if verified else "Verification failed"
        result_obj.output = ManifestVerifyOutput(
            errors=recorder.messages("error"),
            warnings=recorder.messages("warning"),
            destination=str(destination),
            verified=verified,
            installed_version=state.version if state else "",
            messages=recorder.messages(),
        ).model_dump(mode="python")
        result_obj.success = verified

    return StageResult(
        announce="Verifying indexes...",
        progress_callback=do_work,
    )
