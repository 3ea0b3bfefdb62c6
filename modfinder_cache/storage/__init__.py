"""
Storage Layer.

This package handles all data persistence: the configuration file and the
manifest of cached mods.
"""

from .config_manager import ConfigManager
from .manifest_store import ManifestStore

__all__ = ["ConfigManager", "ManifestStore"]
