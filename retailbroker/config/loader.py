"""Layered TOML configuration for the broker.

A broker run reads ``default.toml`` and then the overlay named after the
run's environment (``development``, ``tournament``, ...). Overlays only
need the keys they change; tables are merged key by key.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "RETAILBROKER_CONFIG_DIR"
ENVIRONMENT_ENV = "RETAILBROKER_ENV"
DEFAULT_ENVIRONMENT = "development"
BASE_LAYER = "default.toml"

# checkout root: retailbroker/config/loader.py -> ../../config
_BUNDLED_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


def get_config_dir() -> Path:
    """Locate the directory holding the broker's TOML layers.

    RETAILBROKER_CONFIG_DIR wins when set. Otherwise the nearest
    ``config/`` with a base layer, walking up from the working directory,
    and finally the one shipped next to the package.

    Raises:
        FileNotFoundError: If RETAILBROKER_CONFIG_DIR points nowhere
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        path = Path(override)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {override}")
        return path

    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / "config"
        if (candidate / BASE_LAYER).is_file():
            return candidate

    return _BUNDLED_CONFIG_DIR


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML layer.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base with override applied, merging nested tables.

    Neither argument is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_layers(config_dir: Path, environment: str) -> list[Path]:
    """Files to merge, lowest priority first.

    The environment overlay is optional; the base layer is not.
    """
    base = config_dir / BASE_LAYER
    if not base.is_file():
        raise FileNotFoundError(
            f"Base configuration not found: {base}. "
            f"Create config/{BASE_LAYER} or set {CONFIG_DIR_ENV}."
        )

    layers = [base]
    overlay = config_dir / f"{environment}.toml"
    if overlay != base and overlay.is_file():
        layers.append(overlay)
    return layers


def load_config(
    environment: str | None = None,
    config_dir: Path | None = None,
) -> dict[str, Any]:
    """Merge the base layer with the environment's overlay.

    Args:
        environment: Overlay name (defaults to RETAILBROKER_ENV)
        config_dir: Directory of layers (defaults to get_config_dir())
    """
    config_dir = config_dir or get_config_dir()
    environment = environment or get_environment()

    config: dict[str, Any] = {}
    for layer in config_layers(config_dir, environment):
        config = deep_merge(config, load_toml(layer))
    return config
