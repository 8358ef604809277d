"""Search command - similarity search over the local store."""

from collections.abc import Iterator

from .._output_schemas.store import StoreSearchOutput
from ..config.load_config_with_output import load_config_with_output
from ..embed.get_embedder import get_embedder
from ..errors.CtxpackError import CtxpackError
from ..StageResult import StageResult
from ._hit_to_dict import _hit_to_dict
from .ChunkStore import DEFAULT_K, ChunkStore


def cmd_search(
    query: str,
    repo: str = "",
    k: int = DEFAULT_K,
    must_only: bool = False,
    section: str = "",
) -> StageResult:
    """Embed the query and rank stored chunks against it."""
    echo = {"query": query, "repo": repo, "section": section, "must_only": must_only, "k": k}

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config, error_output = load_config_with_output(StoreSearchOutput, **echo)
        if config is None:
            result_obj.result = "Failed to load configuration"
            result_obj.output = error_output or {}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        if not query.strip():
            result_obj.result = "Query is required"
            result_obj.output = StoreSearchOutput(errors=["query is required"], warnings=[], **echo).model_dump(
                mode="python"
            )
            result_obj.success = False
            yield (1.0, "Complete")
            return

        try:
            yield (0.3, f"Embedding query with {config.embedding.model}...")
            embedder = get_embedder(config.embedding, timeout=config.release.timeout_secs)
            [query_embedding] = embedder.embed([query])

            yield (0.7, "Scoring chunks...")
            store = ChunkStore.from_config(config.store)
            hits = store.search_scored(
                query_embedding,
                repo=repo or None,
                k=k,
                must_only=must_only,
                section=section or None,
            )
        except (CtxpackError, OSError) as e:
            result_obj.result = f"Search failed: {e}"
            result_obj.output = StoreSearchOutput(errors=[str(e)], warnings=[], **echo).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(hits)} results for '{query}'"
        result_obj.output = StoreSearchOutput(
            errors=[],
            warnings=[],
            hits=[_hit_to_dict(hit.chunk, hit.score) for hit in hits],
            **echo,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Searching for '{query}'...",
        progress_callback=do_work,
    )
