"""Tests for runtime settings loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lister.config import AppSettings, SettingsLoadError, config_load_database_url, config_load_settings


def test_config_store_urls_fall_back_to_database_url() -> None:
    settings = AppSettings(_env_file=None, database_url="sqlite:///catalog.db")

    assert settings.resolved_applications_database_url == "sqlite:///catalog.db"
    assert settings.resolved_environments_database_url == "sqlite:///catalog.db"


def test_config_store_urls_can_point_at_independent_databases() -> None:
    settings = AppSettings(
        _env_file=None,
        database_url="sqlite:///default.db",
        applications_database_url="sqlite:///applications.db",
        environments_database_url=" sqlite:///environments.db ",
    )

    assert settings.resolved_applications_database_url == "sqlite:///applications.db"
    assert settings.resolved_environments_database_url == "sqlite:///environments.db"


def test_config_log_level_is_normalized() -> None:
    assert AppSettings(_env_file=None, log_level="debug").log_level == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [
        {"log_level": "verbose"},
        {"database_url": "   "},
        {"applications_database_url": ""},
        {"application_port": 0},
    ],
)
def test_config_rejects_invalid_values(overrides) -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, **overrides)


def test_config_load_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "catalog")
    monkeypatch.setenv("APPLICATION_PORT", "9090")

    settings = config_load_settings()

    assert settings.service_name == "catalog"
    assert settings.application_port == 9090


def test_config_load_settings_wraps_validation_errors(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(SettingsLoadError):
        config_load_settings()


def test_config_load_database_url_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///migrations.db")

    assert config_load_database_url() == "sqlite:///migrations.db"
