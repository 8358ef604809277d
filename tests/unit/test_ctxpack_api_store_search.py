"""Unit tests for ChunkStore.search and dependency_boost."""

import pytest

from ctxpack.api.errors import CorruptIndexError, InvalidInputError
from ctxpack.api.store import DEFAULT_K, ChunkStore
from ctxpack.api.store.dependency_boost import dependency_boost
from tests.conftest import make_chunk


@pytest.fixture
def store(tmp_path) -> ChunkStore:
    return ChunkStore(tmp_path)


def test_dependency_boost_values():
    assert dependency_boost(None) == 1.0
    assert dependency_boost(1) == pytest.approx(1.1)
    assert dependency_boost(2) == pytest.approx(1.05)
    assert dependency_boost(10) == pytest.approx(1.01)


def test_dependency_boost_decreases_with_rank():
    boosts = [dependency_boost(rank) for rank in range(1, 8)]
    assert boosts == sorted(boosts, reverse=True)
    assert all(b > 1.0 for b in boosts)


def test_ranked_chunk_beats_unranked_equal_match(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0, 0.0], rule_level="MUST", dependency_rank=1))
    store.append("lib", make_chunk("lib:a.md#1", [1.0, 0.0], rule_level="SHOULD"))

    hits = store.search_scored([1.0, 0.0], k=2)

    assert [h.chunk.id for h in hits] == ["lib:a.md#0", "lib:a.md#1"]
    assert hits[0].score == pytest.approx(1.1)
    assert hits[1].score == pytest.approx(1.0)


def test_must_only_filters_rule_level(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0, 0.0], rule_level="MUST", dependency_rank=1))
    store.append("lib", make_chunk("lib:a.md#1", [1.0, 0.0], rule_level="SHOULD"))
    store.append("lib", make_chunk("lib:a.md#2", [1.0, 0.0], rule_level="MUST NOT"))

    results = store.search([1.0, 0.0], must_only=True)

    assert [c.id for c in results] == ["lib:a.md#0"]


def test_search_orders_by_similarity(store):
    store.append("lib", make_chunk("lib:a.md#0", [0.0, 1.0]))
    store.append("lib", make_chunk("lib:a.md#1", [1.0, 0.0]))
    store.append("lib", make_chunk("lib:a.md#2", [1.0, 1.0]))

    results = store.search([1.0, 0.1])

    assert [c.id for c in results] == ["lib:a.md#1", "lib:a.md#2", "lib:a.md#0"]


def test_equal_scores_ordered_by_id(store):
    store.append("lib", make_chunk("lib:a.md#2", [1.0, 0.0]))
    store.append("app", make_chunk("app:z.md#0", [1.0, 0.0]))
    store.append("lib", make_chunk("lib:a.md#1", [1.0, 0.0]))

    results = store.search([1.0, 0.0])

    assert [c.id for c in results] == ["app:z.md#0", "lib:a.md#1", "lib:a.md#2"]


def test_default_k_truncates(store):
    for i in range(DEFAULT_K + 3):
        store.append("lib", make_chunk(f"lib:a.md#{i}", [1.0, float(i)]))

    assert len(store.search([1.0, 0.0])) == DEFAULT_K
    assert len(store.search([1.0, 0.0], k=2)) == 2
    assert len(store.search([1.0, 0.0], k=100)) == DEFAULT_K + 3


@pytest.mark.parametrize("k", [0, -1, True, 1.5, "3"])
def test_invalid_k_rejected(store, k):
    store.append("lib", make_chunk("lib:a.md#0", [1.0]))
    with pytest.raises(InvalidInputError):
        store.search([1.0], k=k)


def test_repo_scope(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0, 0.0]))
    store.append("app", make_chunk("app:b.md#0", [1.0, 0.0], dependency_rank=1))

    results = store.search([1.0, 0.0], repo="lib")

    assert [c.id for c in results] == ["lib:a.md#0"]


def test_unknown_repo_is_empty(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0]))
    assert store.search([1.0], repo="other") == []


def test_empty_store_is_empty(store):
    assert store.search([1.0, 0.0]) == []


def test_section_filter_matches_any_heading(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0], headings=["Guide", "Security"]))
    store.append("lib", make_chunk("lib:a.md#1", [1.0], headings=["Guide", "Performance"]))
    store.append("lib", make_chunk("lib:a.md#2", [1.0], headings=["Security notes"]))

    results = store.search([1.0], section="  security ")

    assert [c.id for c in results] == ["lib:a.md#0"]


def test_zero_query_scores_zero(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0, 0.0], dependency_rank=1))

    [hit] = store.search_scored([0.0, 0.0])

    assert hit.score == 0.0


def test_dimension_mismatch_raises(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0, 0.0, 0.0]))
    with pytest.raises(InvalidInputError):
        store.search([1.0, 0.0])


def test_corrupt_candidate_file_fails_search(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0]))
    with store.file_for("app").open("w", encoding="utf-8") as fh:
        fh.write("not json\n")

    with pytest.raises(CorruptIndexError):
        store.search([1.0])
    # scoped search never opens the corrupt file
    assert [c.id for c in store.search([1.0], repo="lib")] == ["lib:a.md#0"]


def test_search_rereads_disk(store):
    store.append("lib", make_chunk("lib:a.md#0", [1.0]))
    assert len(store.search([1.0])) == 1

    store.append("lib", make_chunk("lib:a.md#1", [1.0]))
    assert len(store.search([1.0])) == 2
