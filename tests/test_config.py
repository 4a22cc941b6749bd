import os
from pathlib import Path

import pytest

from contacts_app.config import ConfigError, Settings, load_settings, settings_from_env


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "CONTACTS_ENV",
        "CONTACTS_STORE",
        "CONTACTS_FORCE_FILE",
        "CONTACTS_DIR",
        "CONTACTS_COLLECTION",
        "CONTACTS_SEED",
        "CONTACTS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(clean_env):
    settings = settings_from_env()

    assert settings.environment == "local"
    assert settings.store == "auto"
    assert settings.collection == "contacts"
    assert settings.seed is True
    assert settings.log_level == "INFO"
    assert settings.force_file is False


def test_force_file_overrides_store(clean_env, monkeypatch):
    monkeypatch.setenv("CONTACTS_STORE", "firestore")
    monkeypatch.setenv("CONTACTS_FORCE_FILE", "1")

    assert settings_from_env().store == "file"


def test_unknown_store_raises(clean_env, monkeypatch):
    monkeypatch.setenv("CONTACTS_STORE", "redis")

    with pytest.raises(ConfigError):
        settings_from_env()


def test_overrides(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("CONTACTS_ENV", "staging")
    monkeypatch.setenv("CONTACTS_DIR", str(tmp_path))
    monkeypatch.setenv("CONTACTS_SEED", "0")
    monkeypatch.setenv("CONTACTS_LOG_LEVEL", "debug")

    settings = settings_from_env()

    assert settings.environment == "staging"
    assert settings.contacts_dir == Path(tmp_path)
    assert settings.seed is False
    assert settings.log_level == "DEBUG"


def test_load_settings_reads_dotenv(clean_env, monkeypatch, tmp_path):
    monkeypatch.setattr(os, "environ", dict(os.environ))
    env_file = tmp_path / ".env"
    env_file.write_text("CONTACTS_ENV=from-dotenv\nCONTACTS_STORE=file\n", encoding="utf-8")

    settings = load_settings(dotenv_path=str(env_file))

    assert isinstance(settings, Settings)
    assert settings.environment == "from-dotenv"
    assert settings.store == "file"


def test_environment_wins_over_dotenv(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CONTACTS_ENV=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("CONTACTS_ENV", "from-env")

    assert load_settings(dotenv_path=str(env_file)).environment == "from-env"
