"""Brief command - assemble a task brief across repos."""

from collections.abc import Iterator

from .._output_schemas.store import StoreBriefOutput
from ..config.load_config_with_output import load_config_with_output
from ..embed.get_embedder import get_embedder
from ..errors.CtxpackError import CtxpackError
from ..StageResult import StageResult
from ._hit_to_dict import _hit_to_dict
from .build_brief import build_brief
from .ChunkStore import ChunkStore


def cmd_brief(task: str, repos: list[str] | None = None) -> StageResult:
    """Embed the task and collect the top hits of each repo.

    Args:
        task: Task description used as the query
        repos: Repos to include (defaults to the configured order, then every repo in the store)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(StoreBriefOutput, task=task, repos=list(repos or []))
        if config is None:
            result_obj.result = "Failed to load configuration"
            result_obj.output = error_output or {}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        if not task.strip():
            result_obj.result = "Task is required"
            result_obj.output = StoreBriefOutput(errors=["task is required"], warnings=[], task=task).model_dump(
                mode="python"
            )
            result_obj.success = False
            yield (1.0, "Complete")
            return

        store = ChunkStore.from_config(config.store)
        selected = list(repos or []) or list(config.order) or store.repos()
        warnings = [] if selected else ["store has no repos"]

        try:
            yield (0.3, f"Embedding task with {config.embedding.model}...")
            embedder = get_embedder(config.embedding, timeout=config.release.timeout_secs)
            [query_embedding] = embedder.embed([task])

            yield (0.7, f"Searching {len(selected)} repos...")
            brief = build_brief(
                store,
                query_embedding,
                selected,
                task=task,
                title=config.pack,
                order=config.order,
            )
        except (CtxpackError, OSError) as e:
            result_obj.result = f"Brief failed: {e}"
            result_obj.output = StoreBriefOutput(
                errors=[str(e)], warnings=warnings, task=task, repos=selected
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (1.0, "Complete")
        result_obj.result = f"Brief built from {sum(len(s.hits) for s in brief.sections)} chunks"
        result_obj.output = StoreBriefOutput(
            errors=[],
            warnings=warnings,
            task=task,
            repos=selected,
            order=list(config.order),
            sections=[
                {"repo": s.repo, "hits": [_hit_to_dict(hit.chunk, hit.score) for hit in s.hits]}
                for s in brief.sections
            ],
            brief=brief.render(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Building brief for '{task}'...",
        progress_callback=do_work,
    )
