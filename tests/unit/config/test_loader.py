"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from retailbroker.config.loader import (
    config_layers,
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_nested_tables(self) -> None:
        """Nested tables are merged recursively."""
        base = {"pricing": {"margin": 0.5, "fixed_per_kwh_cost": -0.06}, "broker_name": "a"}
        override = {"pricing": {"margin": 0.2}}
        result = deep_merge(base, override)
        assert result == {
            "pricing": {"margin": 0.2, "fixed_per_kwh_cost": -0.06},
            "broker_name": "a",
        }

    def test_override_replaces_non_dict(self) -> None:
        result = deep_merge({"rules": {"supersede": {}}}, {"rules": "off"})
        assert result == {"rules": "off"}

    def test_base_unmodified(self) -> None:
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        toml_file = tmp_path / "test.toml"
        toml_file.write_text("[estimation]\nhistory_length = 24\nalpha = 0.5")
        assert load_toml(toml_file) == {"estimation": {"history_length": 24, "alpha": 0.5}}

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RETAILBROKER_ENV", "tournament")
        assert get_environment() == "tournament"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RETAILBROKER_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    def test_uses_env_var_when_set(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_dir = tmp_path / "custom_config"
        config_dir.mkdir()
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(config_dir))
        assert get_config_dir() == config_dir

    def test_raises_for_missing_env_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(tmp_path / "missing"))
        with pytest.raises(FileNotFoundError):
            get_config_dir()

    def test_walks_up_to_nearest_config(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({"default.toml": "broker_name = 'base'"})
        nested = test_config_dir.parent / "runs" / "tournament-1"
        nested.mkdir(parents=True)
        monkeypatch.delenv("RETAILBROKER_CONFIG_DIR", raising=False)
        monkeypatch.chdir(nested)
        assert get_config_dir() == test_config_dir


class TestLoadConfig:
    """Tests for load_config function."""

    def test_merges_environment_config(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({
            "default.toml": "broker_name = 'base'\n[pricing]\nmargin = 0.5",
            "tournament.toml": "[pricing]\nmargin = 0.25",
        })
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("RETAILBROKER_ENV", "tournament")

        assert load_config() == {"broker_name": "base", "pricing": {"margin": 0.25}}

    def test_missing_env_file_is_optional(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({"default.toml": "broker_name = 'base'"})
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("RETAILBROKER_ENV", "nonexistent")
        assert load_config() == {"broker_name": "base"}

    def test_missing_default_raises(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(test_config_dir))
        with pytest.raises(FileNotFoundError, match="default.toml"):
            load_config()

    def test_explicit_arguments_beat_environment(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({
            "default.toml": "[estimation]\nalpha = 0.3",
            "tournament.toml": "[estimation]\nalpha = 0.1",
        })
        monkeypatch.setenv("RETAILBROKER_ENV", "development")
        config = load_config(environment="tournament", config_dir=test_config_dir)
        assert config == {"estimation": {"alpha": 0.1}}


class TestConfigLayers:
    """Tests for config_layers function."""

    def test_base_then_overlay(self, test_config_dir: Path, mock_toml_files) -> None:
        mock_toml_files({"default.toml": "", "tournament.toml": ""})
        assert config_layers(test_config_dir, "tournament") == [
            test_config_dir / "default.toml",
            test_config_dir / "tournament.toml",
        ]

    def test_default_environment_not_applied_twice(
        self, test_config_dir: Path, mock_toml_files
    ) -> None:
        mock_toml_files({"default.toml": ""})
        assert config_layers(test_config_dir, "default") == [test_config_dir / "default.toml"]
