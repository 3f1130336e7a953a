"""Unit tests for application settings configuration."""

from pathlib import Path

from warranty_manager.config import Settings
from warranty_manager.infrastructure.database.session import get_async_url


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_warranty_defaults():
    settings = Settings(_env_file=None)
    assert settings.warranty_years == 3
    assert settings.expiring_soon_days == 90
    assert settings.strict_references is False
    assert settings.analytics_top_n == 5


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("STRICT_REFERENCES", "true")
    monkeypatch.setenv("SUPPORT_COUNTRY_CODE", "ES")
    settings = Settings(_env_file=None)
    assert settings.strict_references is True
    assert settings.support_country_code == "ES"


def test_async_url_mapping():
    assert get_async_url("sqlite:///./x.db") == "sqlite+aiosqlite:///./x.db"
    assert get_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert get_async_url("sqlite+aiosqlite:///x.db") == "sqlite+aiosqlite:///x.db"
