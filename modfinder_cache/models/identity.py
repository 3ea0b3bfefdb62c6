"""
Pydantic model identifying a single mod, used as the cache manifest key.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class ModKind(str, Enum):
    """The kinds of mods known to ModFinder."""

    UMM = "UMM"
    OWLCAT = "Owlcat"
    PORTRAIT = "Portrait"


# Only Unity Mod Manager mods can be moved in and out of the local cache.
SUPPORTED_KINDS = frozenset({ModKind.UMM})


class ModId(BaseModel):
    """An immutable, hashable (kind, id) pair naming a mod."""

    kind: ModKind = Field(alias="Type")
    id: str = Field(alias="Id")

    class Config:
        """Pydantic model configuration."""

        frozen = True
        populate_by_name = True
        str_strip_whitespace = True

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not v:
            raise ValueError("Mod id cannot be empty.")
        return v

    @property
    def is_supported(self) -> bool:
        return self.kind in SUPPORTED_KINDS

    def sort_key(self) -> tuple[str, str]:
        return self.kind.value, self.id.casefold()

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"
