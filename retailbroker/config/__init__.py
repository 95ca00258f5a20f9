"""Configuration loading for the retail broker.

Usage:
    from retailbroker.config import get_settings

    settings = get_settings()
    margin = settings.pricing.margin
"""

from functools import lru_cache

from retailbroker.config.loader import load_config
from retailbroker.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    TOML files are read once and cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
