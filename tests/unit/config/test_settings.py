"""Unit tests for Settings class and get_settings function."""

from pathlib import Path

import pytest

from auditor.config import get_settings, reload_settings
from auditor.config.settings import Settings, set_toml_config


@pytest.fixture(autouse=True)
def empty_toml_config() -> None:
    set_toml_config({})


class TestSettings:
    """Tests for Settings model."""

    def test_default_values(self) -> None:
        settings = Settings()

        assert settings.app_name == "auditor"
        assert settings.debug is False
        assert settings.api.auth_token is None

    def test_audit_defaults(self) -> None:
        settings = Settings()

        assert settings.audit.max_length == 32
        assert settings.audit.failure_policy == "raise"
        assert settings.audit.strict_constraints is False
        assert settings.audit.sink == "logging"

    def test_observability_defaults(self) -> None:
        settings = Settings()

        assert settings.observability.logging.level == "INFO"
        assert settings.observability.metrics.path == "/metrics"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AUDITOR_AUDIT__FAILURE_POLICY", "ignore")
        monkeypatch.setenv("AUDITOR_API__AUTH_TOKEN", "s3cret")

        settings = Settings()

        assert settings.audit.failure_policy == "ignore"
        assert settings.api.auth_token is not None
        assert settings.api.auth_token.get_secret_value() == "s3cret"

    def test_invalid_policy_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AUDITOR_AUDIT__FAILURE_POLICY", "retry")

        with pytest.raises(ValueError):
            Settings()

    def test_cors_origins_from_string(self) -> None:
        settings = Settings(api={"cors_origins": "https://a.example, https://b.example"})

        assert settings.api.cors_origins == ["https://a.example", "https://b.example"]


class TestGetSettings:
    """Tests for get_settings function."""

    def test_loads_toml(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "app_name = 'test'\n[audit]\nmax_length = 48\n"})
        monkeypatch.setenv("AUDITOR_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("AUDITOR_ENV", "nonexistent")

        settings = get_settings()

        assert settings.app_name == "test"
        assert settings.audit.max_length == 48

    def test_env_beats_toml(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "[audit]\nmax_length = 48\n"})
        monkeypatch.setenv("AUDITOR_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("AUDITOR_AUDIT__MAX_LENGTH", "64")

        assert get_settings().audit.max_length == 64

    def test_settings_cached(
        self, test_config_dir: Path, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "app_name = 'first'"})
        monkeypatch.setenv("AUDITOR_CONFIG_DIR", str(test_config_dir))

        first = get_settings()
        mock_toml_files({"default.toml": "app_name = 'second'"})

        assert get_settings() is first
        assert reload_settings().app_name == "second"
