"""Shared pytest configuration and fixtures for all tests."""

import json
import shutil
from pathlib import Path

import pytest
import requests

from ctxpack.api.config.CtxpackConfig import CtxpackConfig
from ctxpack.api.config.ReleaseConfig import ReleaseConfig
from ctxpack.api.manifest.build_manifest import build_manifest
from ctxpack.api.store.Chunk import Chunk
from ctxpack.api.store.ChunkStore import ChunkStore

REPO_URL = "https://example.test/acme/pack"
VERSION = "v1.0.0"
RELEASE_URL = f"{REPO_URL}/releases/download/{VERSION}"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network or models")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(store_dir: Path) -> dict:
    """Minimal valid ctxpack configuration dict for testing."""
    return {
        "pack": "Test Pack",
        "store": {"base_dir": str(store_dir)},
        "release": {"repo_url": REPO_URL, "version": VERSION},
        "embedding": {"provider": "remote", "model": "test-model", "token": "secret", "dim": 2},
    }


def minimal_release() -> ReleaseConfig:
    return ReleaseConfig(repo_url=REPO_URL, version=VERSION)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_chunk(
    chunk_id: str,
    embedding: list[float],
    *,
    rule_level: str | None = None,
    dependency_rank: int | None = None,
    headings: list[str] | None = None,
    text: str | None = None,
) -> Chunk:
    """Build a Chunk whose repo and file are derived from its id."""
    repo, _, rest = chunk_id.partition(":")
    file = rest.split("#", 1)[0]
    return Chunk(
        id=chunk_id,
        repo=repo,
        file=file,
        headings=headings or [],
        rule_level=rule_level,
        text=text or f"Text of {chunk_id}",
        dependency_rank=dependency_rank,
        embedding=embedding,
    )


# =============================================================================
# Fake release server
# =============================================================================


class FakeResponse:
    """Minimal stand-in for requests.Response used as a context manager."""

    def __init__(self, url: str, content: bytes | None, status_code: int = 200):
        self.url = url
        self.content = content or b""
        self.status_code = status_code if content is not None else 404

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error for url: {self.url}")

    def iter_content(self, chunk_size: int = 1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i : i + chunk_size]

    def json(self):
        return json.loads(self.content)


class FakeRelease:
    """Serves files from a directory at RELEASE_URL and records requested URLs."""

    def __init__(self, root: Path):
        self.root = root
        self.requested: list[str] = []
        self.offline = False

    def get(self, url: str, **_kwargs) -> FakeResponse:
        self.requested.append(url)
        if self.offline:
            raise requests.ConnectionError(f"Failed to resolve {url}")
        if not url.startswith(RELEASE_URL + "/"):
            return FakeResponse(url, None)
        path = self.root / url[len(RELEASE_URL) + 1 :]
        return FakeResponse(url, path.read_bytes() if path.is_file() else None)

    def corrupt(self, name: str) -> None:
        """Replace a published artifact with different bytes."""
        (self.root / name).write_bytes(b"not the published artifact")


@pytest.fixture
def published(tmp_path, monkeypatch) -> FakeRelease:
    """A release with repos lib and app, served through a patched requests.get."""
    source = tmp_path / "publish"
    store = ChunkStore(source)
    store.append("lib", make_chunk("lib:docs/a.md#0", [1.0, 0.0], rule_level="MUST", dependency_rank=1))
    store.append("lib", make_chunk("lib:docs/a.md#1", [0.0, 1.0], dependency_rank=1))
    store.append("app", make_chunk("app:docs/b.md#0", [1.0, 1.0], rule_level="SHOULD", dependency_rank=2))
    build_manifest(source, pack="Test Pack", version=VERSION, embedding_model="test-model", embedding_dim=2)

    release_root = tmp_path / "release"
    release_root.mkdir()
    for path in source.iterdir():
        if path.suffix == ".gz" or path.name == "index-manifest.json":
            shutil.copy(path, release_root / path.name)

    fake = FakeRelease(release_root)
    monkeypatch.setattr(requests, "get", fake.get)
    return fake


@pytest.fixture
def ctxpack_home(tmp_path, monkeypatch) -> dict:
    """Write config.json under CTXPACK_HOME and return paths."""
    home = tmp_path / "ctxpack_home"
    home.mkdir()
    store_dir = tmp_path / "store"
    (home / "config.json").write_text(json.dumps(minimal_config_dict(store_dir)))
    monkeypatch.setenv("CTXPACK_HOME", str(home))
    return {"home": home, "store_dir": store_dir}


@pytest.fixture
def loaded_config(ctxpack_home) -> CtxpackConfig:
    return CtxpackConfig.load()
