"""
Moves mod directories between the active install root and the local cache.

Uninstalling a mod through the cache copies its directory into the cache,
removes it from the install root and records it in the manifest. Restoring
reverses those steps.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path

from modfinder_cache.exceptions import (
    InvalidModDirectoryError,
    ManifestSaveError,
    UnsupportedKindError,
)
from modfinder_cache.models.config import CacheConfig
from modfinder_cache.models.identity import ModId
from modfinder_cache.models.manifest import CachedMod
from modfinder_cache.storage.manifest_store import ManifestStore
from modfinder_cache.utils.fs import copy_directory, delete_directory, dir_exists

log = logging.getLogger(__name__)


class CacheOutcome(str, Enum):
    """Result of a cache-out request."""

    CACHED = "cached"
    ALREADY_CACHED = "already_cached"


class ModCache:
    """
    Performs the two cache transitions and keeps the manifest in step with the
    filesystem.
    """

    def __init__(self, manifest: ManifestStore, install_root: Path):
        self.manifest = manifest
        self.install_root = install_root
        # identity -> [lock, number of callers holding or waiting on it]
        self._locks: dict[ModId, list] = {}
        self._locks_guard = threading.Lock()

    @classmethod
    def from_config(cls, config: CacheConfig) -> "ModCache":
        return cls(ManifestStore(config.cache_dir), config.install_root)

    @property
    def cache_dir(self) -> Path:
        return self.manifest.cache_dir

    @contextmanager
    def _locked(self, mod_id: ModId) -> Iterator[None]:
        """Serializes transitions for one identity without blocking other mods."""
        with self._locks_guard:
            entry = self._locks.setdefault(mod_id, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[mod_id]

    @staticmethod
    def _ensure_supported(mod_id: ModId) -> None:
        if not mod_id.is_supported:
            raise UnsupportedKindError(
                f"Currently {mod_id.kind.value} mods are not supported."
            )

    def _resolve_active_dir(self, active_dir: Path) -> Path:
        """Resolves `.`, `..` and relative paths to the real mod folder."""
        active_dir = Path(active_dir).resolve()
        if not active_dir.name:
            raise InvalidModDirectoryError(
                f"'{active_dir}' has no folder name and cannot be cached."
            )
        if self.cache_dir.resolve().is_relative_to(active_dir):
            raise InvalidModDirectoryError(
                f"'{active_dir}' contains the mod cache and cannot be cached."
            )
        return active_dir

    def cache_out(self, active_dir: Path, mod_id: ModId) -> CacheOutcome:
        """
        Uninstalls a mod by moving its directory into the cache.

        If the cache already holds a directory with the same name, nothing is
        touched and ALREADY_CACHED is returned. A failure to persist the manifest
        is logged but not raised: the files have already been moved.

        Raises:
            UnsupportedKindError: If the mod kind cannot be cached.
            InvalidModDirectoryError: If `active_dir` has no folder name or
            contains the cache itself.
        """
        self._ensure_supported(mod_id)
        active_dir = self._resolve_active_dir(active_dir)
        cache_path = self.cache_dir / active_dir.name

        with self._locked(mod_id):
            log.info(f"Uninstalling {mod_id.id} and caching at '{cache_path}'.")
            if dir_exists(cache_path):
                log.warning(
                    f"A cached copy already exists at '{cache_path}', "
                    f"leaving {mod_id.id} in place."
                )
                return CacheOutcome.ALREADY_CACHED

            copy_directory(active_dir, cache_path)
            delete_directory(active_dir)
            self.manifest.entries[mod_id] = cache_path
            try:
                self.manifest.save()
            except ManifestSaveError as e:
                log.error(f"Cached {mod_id.id} but could not update manifest: {e}")

        return CacheOutcome.CACHED

    def restore_in(self, mod_id: ModId) -> bool:
        """
        Restores a mod from the cache into the install root.

        Returns:
            True if the mod was restored, False if it is not in the cache.

        Raises:
            UnsupportedKindError: If the mod kind cannot be cached.
            ManifestSaveError: If the manifest could not be updated afterwards.
        """
        self._ensure_supported(mod_id)

        with self._locked(mod_id):
            cache_path = self.manifest.get(mod_id)
            if cache_path is None:
                return False

            log.info(f"Restoring {mod_id.id} from local cache.")
            install_path = self.install_root / cache_path.name
            copy_directory(cache_path, install_path)
            delete_directory(cache_path)
            del self.manifest.entries[mod_id]
            self.manifest.save()

        return True

    def is_cached(self, mod_id: ModId) -> bool:
        return mod_id in self.manifest

    def cached_path(self, mod_id: ModId) -> Path | None:
        return self.manifest.get(mod_id)

    def cached_mods(self) -> list[CachedMod]:
        """All cached mods, ordered by kind and id."""
        return [
            CachedMod(identity=mod_id, dir=path)
            for mod_id, path in sorted(
                self.manifest.entries.items(), key=lambda item: item[0].sort_key()
            )
        ]
