"""
Pydantic model for application configuration.
Provides validation for the locations the mod cache works with.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

CACHE_DIR_NAME = "CachedMods"
MANIFEST_FILE_NAME = "Manifest.json"


def get_app_data_dir() -> Path:
    """Returns the per-user data directory ModFinder keeps its state in."""
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
        return base_dir.expanduser() / "ModFinder"
    base_dir = Path(os.getenv("XDG_DATA_HOME", "~/.local/share"))
    return base_dir.expanduser() / "modfinder"


class CacheConfig(BaseModel):
    """A validated configuration model for the mod cache."""

    app_data_root: Path = Field(default_factory=get_app_data_dir)
    install_root: Path

    # Internal fields not loaded from INI file
    config_path: str = Field("", repr=False)

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True
        str_strip_whitespace = True

    @field_validator("app_data_root", "install_root", mode="before")
    @classmethod
    def validate_not_blank(cls, v):
        """Rejects empty paths, which would silently resolve to the working dir."""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Path cannot be empty.")
        return v

    @field_validator("app_data_root", "install_root")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        return v.expanduser()

    @property
    def cache_dir(self) -> Path:
        return self.app_data_root / CACHE_DIR_NAME

    @property
    def manifest_file(self) -> Path:
        return self.cache_dir / MANIFEST_FILE_NAME

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {"config_path"}
        return {key for key in cls.model_fields if key not in internal_fields}
