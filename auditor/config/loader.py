"""Layered TOML configuration files.

Layers, later ones winning:

1. config/default.toml
2. config/{AUDITOR_ENV}.toml

Both layers are optional; a deployment configured purely through
AUDITOR_* environment variables needs no files at all.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "AUDITOR_CONFIG_DIR"
ENVIRONMENT_ENV = "AUDITOR_ENV"
DEFAULT_ENVIRONMENT = "development"
BASE_LAYER = "default"


def get_config_dir() -> Path:
    """Locate the configuration directory.

    AUDITOR_CONFIG_DIR wins and must exist. Otherwise the nearest 'config/'
    directory in the working directory or one of its ancestors is used,
    falling back to a relative 'config' path.
    """
    explicit = os.environ.get(CONFIG_DIR_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {explicit}")
        return path

    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / "config"
        if candidate.is_dir():
            return candidate
    return Path("config")


def get_environment() -> str:
    """Name of the active environment layer."""
    return os.environ.get(ENVIRONMENT_ENV) or DEFAULT_ENVIRONMENT


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    return tomllib.loads(file_path.read_text(encoding="utf-8"))


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base; tables merge, everything else replaces."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged


def config_layers(config_dir: Path, environment: str) -> list[Path]:
    """Existing layer files in merge order."""
    names = [BASE_LAYER] if environment == BASE_LAYER else [BASE_LAYER, environment]
    paths = (config_dir / f"{name}.toml" for name in names)
    return [path for path in paths if path.is_file()]


def load_config(
    config_dir: Path | None = None, environment: str | None = None
) -> dict[str, Any]:
    """Merge every configuration layer into one dictionary.

    Args:
        config_dir: Directory holding the layers, get_config_dir() if None
        environment: Environment layer name, get_environment() if None

    Returns:
        Merged configuration, empty when no layer file exists
    """
    directory = config_dir if config_dir is not None else get_config_dir()
    env = environment if environment is not None else get_environment()

    config: dict[str, Any] = {}
    for path in config_layers(directory, env):
        config = deep_merge(config, load_toml(path))
    return config
