import logging

import pytest

from devroster.settings import PROJECT_ROOT, Settings


@pytest.mark.unit
def test_settings_fails_fast_when_database_url_missing_in_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    # Prevent `load_dotenv()` from injecting a value from local `.env`.
    monkeypatch.setenv("DATABASE_URL", "")

    with pytest.raises(ValueError, match=r"DATABASE_URL.*production"):
        Settings.load()


@pytest.mark.unit
def test_settings_falls_back_to_sqlite_outside_production(monkeypatch) -> None:
    monkeypatch.setenv("FLASK_ENV", "development")
    monkeypatch.setenv("DATABASE_URL", "")

    settings = Settings.load()

    assert settings.database_url.startswith("sqlite:///")
    assert settings.database_url.endswith("devroster_dev.db")


@pytest.mark.unit
def test_settings_does_not_log_database_url_when_sqlite_fallback(monkeypatch, caplog) -> None:
    monkeypatch.setenv("FLASK_ENV", "development")
    monkeypatch.setenv("DATABASE_URL", "")

    caplog.set_level(logging.WARNING, logger="devroster.settings")

    Settings.load()

    assert "sqlite:" not in caplog.text
    assert str(PROJECT_ROOT) not in caplog.text
