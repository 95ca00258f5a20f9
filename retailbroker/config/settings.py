"""Root settings model for retail broker configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from retailbroker.config.models.clock import ClockConfig
from retailbroker.config.models.estimation import EstimationConfig
from retailbroker.config.models.observability import ObservabilityConfig
from retailbroker.config.models.pricing import PricingConfig
from retailbroker.config.models.rules import RulesConfig

# TOML values picked up by the custom settings source
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that reads from the loaded TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object containing all nested sections.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{RETAILBROKER_ENV}.toml (environment overrides)
    4. RETAILBROKER_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="RETAILBROKER_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    broker_name: str = Field(
        default="retail-broker",
        description="Identity used to tell own tariffs from competitors'",
    )

    estimation: EstimationConfig = Field(
        default_factory=EstimationConfig,
        description="Usage estimation settings",
    )
    pricing: PricingConfig = Field(
        default_factory=PricingConfig,
        description="Initial tariff pricing",
    )
    rules: RulesConfig = Field(
        default_factory=RulesConfig,
        description="Tariff improvement rules",
    )
    clock: ClockConfig = Field(
        default_factory=ClockConfig,
        description="Tick clock settings",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: constructor arguments, environment, TOML, model defaults."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
