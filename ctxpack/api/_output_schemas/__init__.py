"""Pydantic output schemas for cmd_* functions."""

from ._base import BaseOutputSchema
from .manifest import ManifestFetchOutput, ManifestPackOutput, ManifestVerifyOutput
from .store import StoreBriefOutput, StoreGetOutput, StoreSearchOutput

__all__ = [
    "BaseOutputSchema",
    "ManifestFetchOutput",
    "ManifestPackOutput",
    "ManifestVerifyOutput",
    "StoreBriefOutput",
    "StoreGetOutput",
    "StoreSearchOutput",
]
