"""Database location settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_flag, optional_env_var
from .errors import InvalidConfigurationError

APP_DIR_NAME: Final[str] = "revisionable"
DEFAULT_DB_FILENAME: Final[str] = "revisionable.db"

DATA_DIR_ENV: Final[str] = "REVISIONABLE_DATA_DIR"
DATABASE_URI_ENV: Final[str] = "DATABASE_URI"
DATABASE_ECHO_ENV: Final[str] = "REVISIONABLE_DB_ECHO"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """Connection settings for the revisions store."""

    uri: str
    echo: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.uri.startswith("sqlite")


def default_data_dir() -> Path:
    """Per-user data directory (XDG data home, or LOCALAPPDATA on Windows)."""

    if os.name == "nt":
        fallback = Path.home() / "AppData" / "Local"
        base = Path(optional_env_var("LOCALAPPDATA", str(fallback)))
    else:
        fallback = Path.home() / ".local" / "share"
        base = Path(optional_env_var("XDG_DATA_HOME", str(fallback)))
    return (base / APP_DIR_NAME).expanduser().resolve()


def get_data_dir() -> Path:
    configured = os.getenv(DATA_DIR_ENV)
    if configured and configured.strip():
        return Path(configured).expanduser().resolve()
    return default_data_dir()


def sqlite_uri(data_dir: Path, filename: str = DEFAULT_DB_FILENAME) -> str:
    """Return a SQLite URI for ``filename`` inside ``data_dir``, creating the directory."""

    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite+pysqlite:///{data_dir / filename}"


def get_database_config() -> DatabaseConfig:
    """Read ``DATABASE_URI``, falling back to a SQLite file in the data directory."""

    echo = env_flag(DATABASE_ECHO_ENV)
    uri = os.getenv(DATABASE_URI_ENV, "").strip()
    if not uri:
        return DatabaseConfig(uri=sqlite_uri(get_data_dir()), echo=echo)
    if "://" not in uri:
        raise InvalidConfigurationError(DATABASE_URI_ENV, uri, "expected a SQLAlchemy URL")
    return DatabaseConfig(uri=uri, echo=echo)
