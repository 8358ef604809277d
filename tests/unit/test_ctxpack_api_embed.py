"""Unit tests for ctxpack.api.embed (HTTP and model calls are mocked)."""

import importlib
import json

import numpy as np
import pytest
import requests

from ctxpack.api.config import EmbeddingConfig
from ctxpack.api.embed import Embedder, LocalEmbedder, RemoteEmbedder, get_embedder
from ctxpack.api.errors import InvalidInputError, TransportError
from tests.conftest import FakeResponse

local_module = importlib.import_module("ctxpack.api.embed.LocalEmbedder")


class _Recorder:
    def __init__(self, responder):
        self.calls: list[dict] = []
        self._responder = responder

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        return self._responder(url, kwargs["json"]["input"])


def _ok(url, batch):
    # rows returned in reverse order to exercise the "index" sort
    data = [{"index": i, "embedding": [float(len(text)), float(i)]} for i, text in enumerate(batch)]
    return FakeResponse(url, json.dumps({"data": list(reversed(data))}).encode())


def test_get_embedder_by_provider():
    assert isinstance(get_embedder(EmbeddingConfig()), RemoteEmbedder)
    assert isinstance(get_embedder(EmbeddingConfig(provider="local")), LocalEmbedder)
    assert isinstance(get_embedder(EmbeddingConfig()), Embedder)


def test_get_embedder_passes_timeout():
    assert get_embedder(EmbeddingConfig(), timeout=5.0).timeout == 5.0


def test_remote_embed(monkeypatch):
    recorder = _Recorder(_ok)
    monkeypatch.setattr(requests, "post", recorder)
    config = EmbeddingConfig(host="https://api.example.test/v1/", token="secret", model="m")

    vectors = RemoteEmbedder(config, timeout=3.0).embed(["a", "bbb"])

    assert vectors == [[1.0, 0.0], [3.0, 1.0]]
    [call] = recorder.calls
    assert call["url"] == "https://api.example.test/v1/embeddings"
    assert call["headers"]["Authorization"] == "Bearer secret"
    assert call["json"] == {"input": ["a", "bbb"], "model": "m"}
    assert call["timeout"] == 3.0


def test_remote_embed_batches(monkeypatch):
    recorder = _Recorder(_ok)
    monkeypatch.setattr(requests, "post", recorder)

    vectors = RemoteEmbedder(EmbeddingConfig(batch_size=2)).embed(["a", "bb", "ccc"])

    assert [call["json"]["input"] for call in recorder.calls] == [["a", "bb"], ["ccc"]]
    assert [v[0] for v in vectors] == [1.0, 2.0, 3.0]


def test_remote_embed_empty_makes_no_request(monkeypatch):
    recorder = _Recorder(_ok)
    monkeypatch.setattr(requests, "post", recorder)
    assert RemoteEmbedder(EmbeddingConfig()).embed([]) == []
    assert recorder.calls == []


def test_remote_http_error(monkeypatch):
    monkeypatch.setattr(requests, "post", _Recorder(lambda url, batch: FakeResponse(url, None)))
    with pytest.raises(TransportError, match="404"):
        RemoteEmbedder(EmbeddingConfig()).embed(["a"])


def test_remote_invalid_json(monkeypatch):
    monkeypatch.setattr(requests, "post", _Recorder(lambda url, batch: FakeResponse(url, b"not json")))
    with pytest.raises(TransportError, match="Invalid embeddings response"):
        RemoteEmbedder(EmbeddingConfig()).embed(["a"])


def test_remote_row_count_mismatch(monkeypatch):
    monkeypatch.setattr(
        requests, "post", _Recorder(lambda url, batch: FakeResponse(url, json.dumps({"data": []}).encode()))
    )
    with pytest.raises(InvalidInputError, match="row count"):
        RemoteEmbedder(EmbeddingConfig()).embed(["a"])


class _FakeModel:
    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    def encode(self, texts, **kwargs):
        self.calls.append((texts, kwargs))
        return np.asarray(self.rows, dtype=np.float32)


def test_local_embed(monkeypatch):
    model = _FakeModel([[1.0, 0.0], [0.0, 1.0]])
    loaded = []
    monkeypatch.setattr(local_module, "_load_embedder", lambda name: loaded.append(name) or model)

    vectors = LocalEmbedder(EmbeddingConfig(provider="local")).embed(["a", "b"])

    assert vectors == [[1.0, 0.0], [0.0, 1.0]]
    assert loaded == [local_module.DEFAULT_LOCAL_MODEL]
    assert model.calls[0][1]["normalize_embeddings"] is True


def test_local_uses_configured_model(monkeypatch):
    loaded = []
    monkeypatch.setattr(local_module, "_load_embedder", lambda name: loaded.append(name) or _FakeModel([[1.0]]))

    LocalEmbedder(EmbeddingConfig(provider="local", model="my/model")).embed(["a"])

    assert loaded == ["my/model"]


def test_local_row_count_mismatch(monkeypatch):
    monkeypatch.setattr(local_module, "_load_embedder", lambda name: _FakeModel([[1.0]]))
    with pytest.raises(InvalidInputError):
        LocalEmbedder(EmbeddingConfig(provider="local")).embed(["a", "b"])


def test_local_empty_does_not_load_model(monkeypatch):
    def _fail(name):
        raise AssertionError("model should not load")

    monkeypatch.setattr(local_module, "_load_embedder", _fail)
    assert LocalEmbedder(EmbeddingConfig(provider="local")).embed([]) == []
