"""Get command - fetch one chunk by id."""

from collections.abc import Iterator

from .._output_schemas.store import StoreGetOutput
from ..config.load_config_with_output import load_config_with_output
from ..errors.ChunkNotFoundError import ChunkNotFoundError
from ..errors.CtxpackError import CtxpackError
from ..StageResult import StageResult
from ._hit_to_dict import _chunk_to_dict
from .ChunkStore import ChunkStore


def cmd_get(chunk_id: str) -> StageResult:
    """Look up a chunk by its <repo>:<file>#<section> id."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(StoreGetOutput, id=chunk_id)
        if config is None:
            result_obj.result = "Failed to load configuration"
            result_obj.output = error_output or {}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.5, "Reading store...")
        store = ChunkStore.from_config(config.store)
        try:
            chunk = store.require(chunk_id)
        except ChunkNotFoundError:
            yield (1.0, "Complete")
            result_obj.result = "NOT_FOUND"
            result_obj.output = StoreGetOutput(errors=[], warnings=[], id=chunk_id, found=False).model_dump(
                mode="python"
            )
            # NOT_FOUND is a successful lookup
            result_obj.success = True
            return
        except CtxpackError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Get failed: {e}"
            result_obj.output = StoreGetOutput(errors=[str(e)], warnings=[], id=chunk_id).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {chunk_id}"
        result_obj.output = StoreGetOutput(
            errors=[],
            warnings=[],
            id=chunk_id,
            found=True,
            chunk=_chunk_to_dict(chunk),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Getting {chunk_id}...",
        progress_callback=do_work,
    )
