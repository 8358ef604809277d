"""Per-repo search re-ranked by rule level."""

from collections.abc import Sequence

from .Brief import Brief, BriefSection
from .ChunkStore import ChunkStore
from .RawChunk import RuleLevel

BRIEF_K = 8

_RULE_WEIGHTS: dict[str, float] = {"MUST": 2.0, "SHOULD": 1.2}


def rule_weight(rule_level: RuleLevel | None) -> float:
    """MUST 2, SHOULD 1.2, anything else 1."""
    return _RULE_WEIGHTS.get(rule_level or "", 1.0)


def build_brief(
    store: ChunkStore,
    query_embedding: Sequence[float],
    repos: Sequence[str],
    *,
    task: str = "",
    title: str = "Context Pack",
    order: Sequence[str] = (),
    k: int = BRIEF_K,
) -> Brief:
    """Search each repo separately and order its hits by rule level.

    Within a rule level, hits keep their search order (boosted similarity,
    then id). Repos appear in the order given.

    Raises:
        InvalidInputError: If k is invalid or a repo name is not a plain name
        CorruptIndexError: If a repo file fails to parse
    """
    sections = []
    for repo in repos:
        hits = store.search_scored(query_embedding, repo=repo, k=k)
        ranked = sorted(hits, key=lambda hit: -rule_weight(hit.chunk.rule_level))
        sections.append(BriefSection(repo=repo, hits=ranked[:k]))
    return Brief(task=task, sections=sections, title=title, order=list(order))
