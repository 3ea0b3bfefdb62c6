"""
Loads and persists the manifest that indexes mods currently held in the cache.
"""

import logging
import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from modfinder_cache.exceptions import ManifestLoadError, ManifestSaveError
from modfinder_cache.models.config import MANIFEST_FILE_NAME
from modfinder_cache.models.identity import ModId
from modfinder_cache.models.manifest import CacheManifest
from modfinder_cache.utils.fs import create_dir

log = logging.getLogger(__name__)


class ManifestStore:
    """
    Owns the Manifest.json document inside the cache directory and the in-memory
    index built from it.

    The index is loaded lazily on first access and then kept for the lifetime of
    the store; it is never reloaded from disk.
    """

    def __init__(self, cache_dir: Path):
        self.cache_dir = cache_dir
        self.manifest_file = cache_dir / MANIFEST_FILE_NAME
        self._entries: dict[ModId, Path] | None = None

    @property
    def entries(self) -> dict[ModId, Path]:
        """The in-memory index of cached mods, keyed by identity."""
        if self._entries is None:
            self._entries = self.load()
        return self._entries

    def load(self) -> dict[ModId, Path]:
        """
        Reads the manifest document into a fresh index.

        Entries whose directory no longer exists are dropped. The document itself
        is left untouched until the next save. A document that cannot be read or
        parsed is logged and treated as empty.
        """
        entries: dict[ModId, Path] = {}
        create_dir(self.cache_dir)

        if not self.manifest_file.is_file():
            return entries

        try:
            manifest = self._read_manifest()
        except ManifestLoadError as e:
            log.warning(str(e))
            return entries

        for mod in manifest.mods:
            if mod.dir.is_dir():
                entries[mod.identity] = mod.dir
            else:
                log.debug(
                    f"Dropping manifest entry for {mod.identity}: "
                    f"'{mod.dir}' no longer exists."
                )

        return entries

    def _read_manifest(self) -> CacheManifest:
        try:
            raw = self.manifest_file.read_text(encoding="utf-8")
            return CacheManifest.model_validate_json(raw)
        except (OSError, ValidationError) as e:
            raise ManifestLoadError(
                f"Failed to load cache manifest '{self.manifest_file}': {e}"
            ) from e

    def save(self, entries: dict[ModId, Path] | None = None) -> None:
        """
        Writes the index to disk, replacing the previous document.

        The new document is written to a temporary file next to the manifest and
        then renamed over it, so readers see either the old or the new version.

        Raises:
            ManifestSaveError: If the document could not be written.
        """
        if entries is None:
            entries = self.entries
        payload = CacheManifest.from_entries(entries).to_json()

        tmp_path = None
        try:
            create_dir(self.cache_dir)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.cache_dir, prefix=".manifest-", suffix=".tmp"
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.manifest_file)
            tmp_path = None
        except OSError as e:
            raise ManifestSaveError(
                f"Failed to write cache manifest '{self.manifest_file}': {e}"
            ) from e
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

        log.debug(f"Saved cache manifest with {len(entries)} entries.")

    def get(self, mod_id: ModId) -> Path | None:
        return self.entries.get(mod_id)

    def __contains__(self, mod_id: object) -> bool:
        return mod_id in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ModId]:
        return iter(self.entries)
