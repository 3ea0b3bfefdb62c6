"""Tests for mod identities and the manifest document models"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from modfinder_cache.models.identity import ModId, ModKind
from modfinder_cache.models.manifest import CacheManifest, CachedMod


class TestModId:
    def test_value_equality_and_hash(self):
        a = ModId(kind=ModKind.UMM, id="ModA")
        b = ModId(kind="UMM", id="ModA")

        assert a == b
        assert hash(a) == hash(b)
        assert {a: 1}[b] == 1

    def test_kind_distinguishes_identities(self):
        assert ModId(kind=ModKind.UMM, id="ModA") != ModId(
            kind=ModKind.OWLCAT, id="ModA"
        )

    def test_is_immutable(self):
        mod_id = ModId(kind=ModKind.UMM, id="ModA")
        with pytest.raises(ValidationError):
            mod_id.id = "ModB"

    def test_accepts_document_field_names(self):
        mod_id = ModId.model_validate({"Type": "UMM", "Id": "ModA"})
        assert mod_id == ModId(kind=ModKind.UMM, id="ModA")

    def test_rejects_blank_id(self):
        with pytest.raises(ValidationError):
            ModId(kind=ModKind.UMM, id="   ")

    def test_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            ModId(kind="Steam", id="ModA")

    def test_only_umm_is_supported(self):
        assert ModId(kind=ModKind.UMM, id="x").is_supported
        assert not ModId(kind=ModKind.OWLCAT, id="x").is_supported
        assert not ModId(kind=ModKind.PORTRAIT, id="x").is_supported

    def test_str(self):
        assert str(ModId(kind=ModKind.UMM, id="ModA")) == "UMM:ModA"


class TestCacheManifest:
    def test_serializes_with_document_field_names(self, tmp_path: Path):
        mod_dir = tmp_path / "ModA"
        manifest = CacheManifest.from_entries(
            {ModId(kind=ModKind.UMM, id="ModA"): mod_dir}
        )

        assert json.loads(manifest.to_json()) == {
            "Mods": [{"Id": {"Type": "UMM", "Id": "ModA"}, "Dir": str(mod_dir)}]
        }

    def test_from_entries_orders_by_identity(self, tmp_path: Path):
        entries = {
            ModId(kind=ModKind.UMM, id="zeta"): tmp_path / "zeta",
            ModId(kind=ModKind.UMM, id="Alpha"): tmp_path / "Alpha",
        }

        manifest = CacheManifest.from_entries(entries)

        assert [m.identity.id for m in manifest.mods] == ["Alpha", "zeta"]

    def test_parses_lower_case_field_names(self):
        manifest = CacheManifest.model_validate(
            {"mods": [{"identity": {"kind": "UMM", "id": "ModA"}, "dir": "/c/ModA"}]}
        )

        assert manifest.mods == [
            CachedMod(identity=ModId(kind=ModKind.UMM, id="ModA"), dir=Path("/c/ModA"))
        ]

    def test_empty_document(self):
        assert CacheManifest.model_validate_json("{}").mods == []
