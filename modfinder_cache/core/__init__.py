"""
Core cache engine.

`ModCache` moves mod directories between the install root and the cache and
keeps the `ManifestStore` index consistent with what is on disk.
"""

from .mod_cache import CacheOutcome, ModCache

__all__ = ["CacheOutcome", "ModCache"]
