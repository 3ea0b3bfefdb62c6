"""Tests for the INI configuration file and its validated model"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from modfinder_cache.exceptions import ConfigurationError
from modfinder_cache.models.config import CacheConfig
from modfinder_cache.storage.config_manager import ConfigManager


class TestCacheConfig:
    def test_derived_locations(self, tmp_path: Path):
        config = CacheConfig(app_data_root=tmp_path, install_root=tmp_path / "mods")

        assert config.cache_dir == tmp_path / "CachedMods"
        assert config.manifest_file == tmp_path / "CachedMods" / "Manifest.json"

    def test_blank_install_root_rejected(self, tmp_path: Path):
        with pytest.raises(ValidationError):
            CacheConfig(app_data_root=tmp_path, install_root="  ")

    def test_install_root_required(self, tmp_path: Path):
        with pytest.raises(ValidationError):
            CacheConfig(app_data_root=tmp_path)

    def test_default_app_data_root(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr("modfinder_cache.models.config.os.name", "posix")
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

        config = CacheConfig(install_root=tmp_path / "mods")

        assert config.app_data_root == tmp_path / "modfinder"

    def test_ini_keys(self):
        assert CacheConfig.get_ini_keys() == {"app_data_root", "install_root"}


class TestConfigManager:
    def test_save_then_load(self, tmp_path: Path):
        manager = ConfigManager(tmp_path / "cfg" / "config.ini")
        manager.save_new_config(
            {"install_root": tmp_path / "mods", "app_data_root": tmp_path / "data"}
        )

        config = ConfigManager(tmp_path / "cfg" / "config.ini").load_config()

        assert config.install_root == tmp_path / "mods"
        assert config.app_data_root == tmp_path / "data"
        assert config.config_path == str(tmp_path / "cfg")

    def test_cli_options_override_file(self, tmp_path: Path):
        config_file = tmp_path / "config.ini"
        ConfigManager(config_file).save_new_config(
            {"install_root": tmp_path / "mods", "app_data_root": tmp_path / "data"}
        )

        config = ConfigManager(config_file).load_config(
            {"install_root": str(tmp_path / "elsewhere")}
        )

        assert config.install_root == tmp_path / "elsewhere"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigManager(tmp_path / "missing.ini").load_config()

    def test_unparseable_file(self, tmp_path: Path):
        config_file = tmp_path / "config.ini"
        config_file.write_text("no section header\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="parsing"):
            ConfigManager(config_file).load_config()

    def test_missing_install_root(self, tmp_path: Path):
        config_file = tmp_path / "config.ini"
        config_file.write_text(
            f"[DEFAULT]\napp_data_root = {tmp_path}\n", encoding="utf-8"
        )

        with pytest.raises(ConfigurationError, match="validation failed"):
            ConfigManager(config_file).load_config()

    def test_save_rejects_invalid_settings(self, tmp_path: Path):
        config_file = tmp_path / "config.ini"

        with pytest.raises(ConfigurationError):
            ConfigManager(config_file).save_new_config({"install_root": ""})

        assert not config_file.exists()

    def test_percent_signs_survive(self, tmp_path: Path):
        config_file = tmp_path / "config.ini"
        ConfigManager(config_file).save_new_config(
            {"install_root": tmp_path / "100%mods", "app_data_root": tmp_path}
        )

        assert ConfigManager(config_file).load_config().install_root == (
            tmp_path / "100%mods"
        )
