"""Unit tests for build_brief, Brief.render and cmd_brief."""

import json

import pytest

from ctxpack.api.errors import InvalidInputError
from ctxpack.api.store import BRIEF_K, ChunkStore, build_brief, rule_weight
from ctxpack.api.store import cmd_brief as cmd_brief_module
from ctxpack.api.store.cmd_brief import cmd_brief
from tests.conftest import make_chunk, run_cmd


@pytest.fixture
def store(tmp_path) -> ChunkStore:
    store = ChunkStore(tmp_path / "store")
    # best similarity first, weakest rule level first
    store.append("lib", make_chunk("lib:a.md#0", [1.0, 0.0], headings=["Guide", "Intro"]))
    store.append("lib", make_chunk("lib:a.md#1", [1.0, 0.2], rule_level="SHOULD", headings=["Guide", "Style"]))
    store.append("lib", make_chunk("lib:a.md#2", [1.0, 0.4], rule_level="MUST", headings=["Guide", "Security"]))
    store.append("app", make_chunk("app:b.md#0", [1.0, 0.0], rule_level="MUST NOT", headings=["Deploy"]))
    return store


def test_rule_weight():
    assert rule_weight("MUST") == 2.0
    assert rule_weight("SHOULD") == 1.2
    assert rule_weight("MUST NOT") == 1.0
    assert rule_weight(None) == 1.0


def test_hits_ordered_by_rule_level(store):
    brief = build_brief(store, [1.0, 0.0], ["lib"])

    [section] = brief.sections
    assert section.repo == "lib"
    assert [h.chunk.id for h in section.hits] == ["lib:a.md#2", "lib:a.md#1", "lib:a.md#0"]


def test_same_rule_level_keeps_search_order(tmp_path):
    store = ChunkStore(tmp_path)
    store.append("lib", make_chunk("lib:a.md#0", [0.0, 1.0], rule_level="MUST"))
    store.append("lib", make_chunk("lib:a.md#1", [1.0, 0.0], rule_level="MUST"))

    [section] = build_brief(store, [1.0, 0.0], ["lib"]).sections

    assert [h.chunk.id for h in section.hits] == ["lib:a.md#1", "lib:a.md#0"]


def test_sections_follow_requested_repos(store):
    brief = build_brief(store, [1.0, 0.0], ["app", "lib", "missing"])

    assert [s.repo for s in brief.sections] == ["app", "lib", "missing"]
    assert brief.sections[2].hits == []


def test_each_repo_limited_to_k(tmp_path):
    store = ChunkStore(tmp_path)
    for i in range(BRIEF_K + 4):
        store.append("lib", make_chunk(f"lib:a.md#{i}", [1.0, float(i)]))

    [section] = build_brief(store, [1.0, 0.0], ["lib"]).sections

    assert len(section.hits) == BRIEF_K


def test_invalid_repo_rejected(store):
    with pytest.raises(InvalidInputError):
        build_brief(store, [1.0, 0.0], ["../lib"])


def test_render(store):
    brief = build_brief(store, [1.0, 0.0], ["lib", "app"], task="add auth", title="Acme", order=["lib", "app"])

    text = brief.render()

    assert text.startswith("# Acme Task Brief\nTask: add auth\n")
    assert "Upstream (lib) overrides downstream" in text
    assert "## lib\n### Guide › Security\n**MUST**\nText of lib:a.md#2\n" in text
    assert "### Guide › Intro\nText of lib:a.md#0\n" in text
    assert text.index("## lib") < text.index("## app")
    assert "**MUST NOT**" in text


class _FixedEmbedder:
    def __init__(self):
        self.calls = []

    def embed(self, texts):
        self.calls.append(texts)
        return [[1.0, 0.0] for _ in texts]


@pytest.fixture
def embedder(monkeypatch):
    fake = _FixedEmbedder()
    monkeypatch.setattr(cmd_brief_module, "get_embedder", lambda config, timeout=None: fake)
    return fake


@pytest.fixture
def populated(ctxpack_home):
    store = ChunkStore(ctxpack_home["store_dir"])
    store.append("lib", make_chunk("lib:a.md#0", [1.0, 0.0]))
    store.append("lib", make_chunk("lib:a.md#1", [0.5, 0.5], rule_level="MUST"))
    store.append("app", make_chunk("app:b.md#0", [1.0, 0.0]))
    return store


def test_cmd_brief_all_repos(populated, embedder):
    result = run_cmd(cmd_brief, "add auth")

    assert result.success is True
    assert embedder.calls == [["add auth"]]
    assert result.output["repos"] == ["app", "lib"]
    lib = result.output["sections"][1]
    assert [h["id"] for h in lib["hits"]] == ["lib:a.md#1", "lib:a.md#0"]
    assert "embedding" not in lib["hits"][0]
    assert result.output["brief"].startswith("# Test Pack Task Brief")


def test_cmd_brief_uses_configured_order(populated, embedder, ctxpack_home):
    config_path = ctxpack_home["home"] / "config.json"
    data = json.loads(config_path.read_text())
    data["order"] = ["lib", "app"]
    config_path.write_text(json.dumps(data))

    result = run_cmd(cmd_brief, "add auth")

    assert result.output["repos"] == ["lib", "app"]
    assert result.output["order"] == ["lib", "app"]


def test_cmd_brief_explicit_repos(populated, embedder):
    result = run_cmd(cmd_brief, "add auth", ["app"])
    assert [s["repo"] for s in result.output["sections"]] == ["app"]


def test_cmd_brief_requires_task(populated, embedder):
    result = run_cmd(cmd_brief, " ")
    assert result.success is False
    assert result.output["errors"] == ["task is required"]
    assert embedder.calls == []


def test_cmd_brief_invalid_repo(populated, embedder):
    result = run_cmd(cmd_brief, "add auth", ["a/b"])
    assert result.success is False
    assert "plain name" in result.output["errors"][0]
