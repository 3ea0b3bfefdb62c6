"""
Pydantic models describing the on-disk cache manifest document.

The document keeps the field names written by earlier ModFinder releases:

    {"Mods": [{"Id": {"Type": "UMM", "Id": "ModA"}, "Dir": "/.../CachedMods/ModA"}]}
"""

from pathlib import Path

from pydantic import BaseModel, Field

from .identity import ModId


class CachedMod(BaseModel):
    """A single cached mod: its identity and the directory holding its files."""

    identity: ModId = Field(alias="Id")
    dir: Path = Field(alias="Dir")

    class Config:
        """Pydantic model configuration."""

        frozen = True
        populate_by_name = True


class CacheManifest(BaseModel):
    """The full list of cached mods, as persisted in Manifest.json."""

    mods: list[CachedMod] = Field(default_factory=list, alias="Mods")

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True

    @classmethod
    def from_entries(cls, entries: dict[ModId, Path]) -> "CacheManifest":
        """Builds a manifest from an in-memory index, ordered by identity."""
        return cls(
            mods=[
                CachedMod(identity=mod_id, dir=path)
                for mod_id, path in sorted(
                    entries.items(), key=lambda item: item[0].sort_key()
                )
            ]
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
