"""Configuration loading for Auditor.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from auditor.config import get_settings

    settings = get_settings()
    max_length = settings.audit.max_length
"""

from functools import lru_cache

from auditor.config.loader import load_config
from auditor.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    Cached for the lifetime of the process; call reload_settings() to
    pick up changed files or environment variables.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
