"""Chunk store API module."""

from .Brief import Brief, BriefSection
from .build_brief import BRIEF_K, build_brief, rule_weight
from .Chunk import Chunk
from .ChunkStore import DEFAULT_K, ChunkStore
from .RawChunk import RawChunk, RuleLevel
from .ScoredChunk import ScoredChunk

__all__ = [
    "BRIEF_K",
    "DEFAULT_K",
    "Brief",
    "BriefSection",
    "Chunk",
    "ChunkStore",
    "RawChunk",
    "RuleLevel",
    "ScoredChunk",
    "build_brief",
    "rule_weight",
]
