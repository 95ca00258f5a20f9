"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from retailbroker.config import get_settings, reload_settings
from retailbroker.config.settings import Settings
from retailbroker.market.enums import PowerType

REPO_CONFIG_DIR = Path(__file__).resolve().parents[3] / "config"


class TestSettings:
    """Tests for Settings defaults."""

    def test_default_values(self) -> None:
        settings = Settings()
        assert settings.broker_name == "retail-broker"
        assert settings.estimation.history_length == 168
        assert settings.estimation.alpha == 0.3

    def test_pricing_defaults(self) -> None:
        pricing = Settings().pricing
        assert pricing.margin == 0.5
        assert pricing.fixed_per_kwh_cost == -0.06
        assert pricing.default_periodic_payment == -1.0
        assert pricing.interruptible_discount == 0.7
        assert pricing.curtailment_cap == 0.1

    def test_rule_defaults(self) -> None:
        rules = Settings().rules
        assert rules.balancing_order.trigger_tick == 365
        assert rules.balancing_order.exercise_ratio == 0.5
        assert rules.balancing_order.payment_multiplier == 0.9
        assert rules.supersede.trigger_tick == 367
        assert rules.supersede.power_type == PowerType.CONSUMPTION
        assert rules.supersede.periodic_payment_inflation == 1.1

    def test_invalid_alpha_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(estimation={"alpha": 1.5})

    def test_env_override(self, env_override) -> None:
        with env_override({
            "RETAILBROKER_BROKER_NAME": "challenger",
            "RETAILBROKER_PRICING__MARGIN": "0.2",
        }):
            settings = Settings()
        assert settings.broker_name == "challenger"
        assert settings.pricing.margin == 0.2


class TestGetSettings:
    """Tests for get_settings function."""

    def test_reads_toml(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({
            "default.toml": "broker_name = 'toml-broker'\n[rules.supersede]\ntrigger_tick = 400",
        })
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("RETAILBROKER_ENV", "nonexistent")

        settings = get_settings()
        assert settings.broker_name == "toml-broker"
        assert settings.rules.supersede.trigger_tick == 400
        assert settings.rules.balancing_order.trigger_tick == 365

    def test_env_beats_toml(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "broker_name = 'toml-broker'"})
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("RETAILBROKER_BROKER_NAME", "env-broker")
        assert get_settings().broker_name == "env-broker"

    def test_settings_cached(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "broker_name = 'first'"})
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(test_config_dir))
        first = get_settings()

        mock_toml_files({"default.toml": "broker_name = 'second'"})
        assert get_settings() is first
        assert reload_settings().broker_name == "second"

    def test_shipped_config_matches_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RETAILBROKER_CONFIG_DIR", str(REPO_CONFIG_DIR))
        monkeypatch.setenv("RETAILBROKER_ENV", "nonexistent")
        defaults = Settings()
        settings = get_settings()
        assert settings.estimation == defaults.estimation
        assert settings.pricing == defaults.pricing
        assert settings.rules == defaults.rules
        assert settings.clock == defaults.clock
