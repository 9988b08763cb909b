"""Tests for the config module."""
from pathlib import Path

from grindbreaker import config


class TestDataDir:
    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GRIND_BREAKER_DATA_DIR", str(tmp_path / "from-env"))

        assert config.get_data_dir({"data_dir": "/ignored"}) == tmp_path / "from-env"

    def test_settings_value(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GRIND_BREAKER_DATA_DIR", raising=False)

        assert config.get_data_dir({"data_dir": str(tmp_path)}) == tmp_path

    def test_default_is_app_data_folder(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GRIND_BREAKER_DATA_DIR", raising=False)
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        monkeypatch.setattr(config.sys, "platform", "linux")

        assert config.get_data_dir({}) == tmp_path / "GrindBreaker"

    def test_ensure_dirs_creates(self, tmp_path):
        target = tmp_path / "a" / "b"

        assert config.ensure_dirs(target) == target
        assert target.is_dir()


class TestSettings:
    def test_missing_file(self, tmp_path):
        assert config.load_settings(tmp_path / "nope.yaml") == {}

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("data_dir: /tmp/gb\nbinding_prefix: APP_\n", encoding="utf-8")

        assert config.load_settings(path) == {"data_dir": "/tmp/gb", "binding_prefix": "APP_"}

    def test_invalid_yaml_ignored(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("data_dir: [unclosed\n", encoding="utf-8")

        assert config.load_settings(path) == {}

    def test_non_mapping_ignored(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        assert config.load_settings(path) == {}

    def test_binding_prefix(self, monkeypatch):
        monkeypatch.delenv("GRIND_BREAKER_BINDING_PREFIX", raising=False)

        assert config.get_binding_prefix({}) == "GRIND_BREAKER_"
        assert config.get_binding_prefix({"binding_prefix": "APP_"}) == "APP_"

        monkeypatch.setenv("GRIND_BREAKER_BINDING_PREFIX", "ENV_")
        assert config.get_binding_prefix({"binding_prefix": "APP_"}) == "ENV_"

    def test_shipped_settings_file_is_valid(self):
        settings = config.load_settings(Path(config.SETTINGS_PATH))

        assert settings.get("binding_prefix") == "GRIND_BREAKER_"
