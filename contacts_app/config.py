"""Configuration helpers for the contacts application."""
from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

VALID_STORES = ("auto", "firestore", "file")
DEFAULT_CONTACTS_DIR = Path(__file__).resolve().parents[1] / "contacts_data"


class ConfigError(RuntimeError):
    """Raised when configuration is present but unusable."""


@dataclass(slots=True)
class Settings:
    """Runtime configuration for the web app and CLI."""

    environment: str = "local"
    store: str = "auto"
    contacts_dir: Path = DEFAULT_CONTACTS_DIR
    collection: str = "contacts"
    seed: bool = True
    log_level: str = "INFO"

    @property
    def force_file(self) -> bool:
        return self.store == "file"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def settings_from_env() -> Settings:
    """Build settings from the current process environment only.

    Raises:
        ConfigError: if CONTACTS_STORE names an unknown backend.
    """

    store = os.getenv("CONTACTS_STORE", "auto").strip().lower() or "auto"
    if store not in VALID_STORES:
        raise ConfigError(
            f"Unknown CONTACTS_STORE '{store}'. Expected one of: {', '.join(VALID_STORES)}."
        )
    if _env_flag("CONTACTS_FORCE_FILE", "0"):
        store = "file"

    return Settings(
        environment=os.getenv("CONTACTS_ENV", "local"),
        store=store,
        contacts_dir=Path(os.getenv("CONTACTS_DIR", str(DEFAULT_CONTACTS_DIR))),
        collection=os.getenv("CONTACTS_COLLECTION", "contacts"),
        seed=_env_flag("CONTACTS_SEED", "1"),
        log_level=os.getenv("CONTACTS_LOG_LEVEL", "INFO").upper(),
    )


def load_settings(*, dotenv_path: Optional[str] = None) -> Settings:
    """Load settings from a ``.env`` file and environment variables.

    Variables already present in the environment win over the file.
    """

    load_dotenv(dotenv_path, override=False)
    return settings_from_env()
