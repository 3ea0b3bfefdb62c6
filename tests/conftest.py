"""Shared fixtures for the mod cache test suite"""

from pathlib import Path

import pytest

from modfinder_cache.core.mod_cache import ModCache
from modfinder_cache.models.identity import ModId, ModKind
from modfinder_cache.storage.manifest_store import ManifestStore


def make_mod(root: Path, name: str, files: dict[str, str] | None = None) -> Path:
    """Creates a fake installed mod directory with the given files."""
    mod_dir = root / name
    mod_dir.mkdir(parents=True)
    for rel_path, content in (files or {"Info.json": f'{{"Id": "{name}"}}'}).items():
        file_path = mod_dir / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    return mod_dir


def snapshot(root: Path) -> dict[str, str]:
    """Maps every file below root (relative path) to its text content."""
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    path = tmp_path / "install"
    path.mkdir()
    return path


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "appdata" / "CachedMods"


@pytest.fixture
def store(cache_dir: Path) -> ManifestStore:
    return ManifestStore(cache_dir)


@pytest.fixture
def cache(store: ManifestStore, install_root: Path) -> ModCache:
    return ModCache(store, install_root)


@pytest.fixture
def mod_a() -> ModId:
    return ModId(kind=ModKind.UMM, id="ModA")
