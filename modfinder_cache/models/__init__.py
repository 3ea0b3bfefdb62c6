"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application: mod identities, the cache manifest and
configuration.
"""

from .config import CacheConfig
from .identity import SUPPORTED_KINDS, ModId, ModKind
from .manifest import CacheManifest, CachedMod

__all__ = [
    "SUPPORTED_KINDS",
    "CacheConfig",
    "CacheManifest",
    "CachedMod",
    "ModId",
    "ModKind",
]
