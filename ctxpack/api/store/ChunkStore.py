"""JSONL-backed chunk storage, one file per repo."""

from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from ...utils.logger import get_logger
from ..config.StoreConfig import StoreConfig
from ..errors.ChunkNotFoundError import ChunkNotFoundError
from ..errors.CorruptIndexError import CorruptIndexError
from ..errors.InvalidInputError import InvalidInputError
from ..vector.cosine_similarity import cosine_similarity
from .Chunk import Chunk
from .dependency_boost import dependency_boost
from .ScoredChunk import ScoredChunk

DEFAULT_K = 6
INDEX_SUFFIX = ".jsonl"

logger = get_logger("store")


class ChunkStore:
    """Append/read/search chunks in ``<base_dir>/<repo>.jsonl`` files.

    Nothing is cached: every read and search goes back to disk.
    """

    def __init__(self, base_dir: Path | str):
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_config(cls, config: StoreConfig) -> "ChunkStore":
        return cls(config.path)

    def file_for(self, repo: str) -> Path:
        """Path of the index file for a repo."""
        _validate_repo(repo)
        return self.base_dir / f"{repo}{INDEX_SUFFIX}"

    def append(self, repo: str, chunk: Chunk) -> None:
        """Append one chunk as one line.

        Earlier lines are never rewritten, so a crash mid-write can only
        damage the line being written.
        """
        path = self.file_for(repo)
        path.parent.mkdir(parents=True, exist_ok=True)
        line = chunk.to_line() + "\n"
        with path.open("a", encoding="utf-8") as fh:
            fh.write(line)
        logger.debug("Appended %s to %s", chunk.id, path)

    def repos(self) -> list[str]:
        """Repo names that have an index file, sorted."""
        return sorted(p.name[: -len(INDEX_SUFFIX)] for p in self.base_dir.glob(f"*{INDEX_SUFFIX}") if p.is_file())

    def read(self, repo: str | None = None) -> list[Chunk]:
        """Read one repo's chunks, or every repo's when repo is None.

        Files are concatenated in repo-name order; lines keep append order.

        Raises:
            CorruptIndexError: If any line fails to parse
        """
        if repo:
            return self._read_file(self.file_for(repo))
        chunks: list[Chunk] = []
        for name in self.repos():
            chunks.extend(self._read_file(self.file_for(name)))
        return chunks

    def get(self, chunk_id: str) -> Chunk | None:
        """Find a chunk by id in the repo named by the id prefix."""
        repo, sep, _ = chunk_id.partition(":")
        if not sep or not repo:
            return None
        for chunk in self.read(repo):
            if chunk.id == chunk_id:
                return chunk
        return None

    def require(self, chunk_id: str) -> Chunk:
        """Like get(), but a miss raises ChunkNotFoundError."""
        chunk = self.get(chunk_id)
        if chunk is None:
            raise ChunkNotFoundError(chunk_id)
        return chunk

    def search(
        self,
        query_embedding: Sequence[float],
        *,
        repo: str | None = None,
        k: int = DEFAULT_K,
        must_only: bool = False,
        section: str | None = None,
    ) -> list[Chunk]:
        """Return up to k chunks ranked by boosted cosine similarity."""
        hits = self.search_scored(query_embedding, repo=repo, k=k, must_only=must_only, section=section)
        return [hit.chunk for hit in hits]

    def search_scored(
        self,
        query_embedding: Sequence[float],
        *,
        repo: str | None = None,
        k: int = DEFAULT_K,
        must_only: bool = False,
        section: str | None = None,
    ) -> list[ScoredChunk]:
        """Linear scan: filter, score, boost by dependency rank, sort, truncate.

        Equal scores are ordered by chunk id so results are deterministic.

        Raises:
            InvalidInputError: If k is not a positive integer or an embedding
                length differs from the query's
            CorruptIndexError: If a candidate file fails to parse
        """
        if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
            raise InvalidInputError(f"k must be a positive integer (found: {k!r})")

        candidates = self.read(repo)
        if must_only:
            candidates = [c for c in candidates if c.rule_level == "MUST"]
        if section:
            candidates = [c for c in candidates if _in_section(c, section)]

        scored = [
            ScoredChunk(
                chunk=c,
                score=cosine_similarity(query_embedding, c.embedding) * dependency_boost(c.dependency_rank),
            )
            for c in candidates
        ]
        scored.sort(key=lambda s: (-s.score, s.chunk.id))
        logger.debug("Scored %d candidates (repo=%s, k=%d)", len(scored), repo or "*", k)
        return scored[:k]

    def _read_file(self, path: Path) -> list[Chunk]:
        if not path.exists():
            return []
        chunks: list[Chunk] = []
        with path.open("rb") as fh:
            for line_number, raw in enumerate(fh, start=1):
                try:
                    stripped = raw.decode("utf-8").strip()
                except UnicodeDecodeError as e:
                    raise CorruptIndexError(path, line_number, f"invalid UTF-8: {e}") from e
                if not stripped:
                    continue
                try:
                    chunks.append(Chunk.model_validate_json(stripped))
                except ValidationError as e:
                    raise CorruptIndexError(path, line_number, str(e)) from e
        return chunks


def _validate_repo(repo: str) -> None:
    if not repo or not repo.strip():
        raise InvalidInputError("repo must be a non-empty string")
    if "/" in repo or "\\" in repo or repo in (".", ".."):
        raise InvalidInputError(f"repo must be a plain name, not a path (found: {repo!r})")


def _in_section(chunk: Chunk, section: str) -> bool:
    wanted = section.strip().casefold()
    return any(heading.strip().casefold() == wanted for heading in chunk.headings)
