"""Environment-driven settings, errors and logging setup."""

from __future__ import annotations

from .env import env_flag, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .logging import configure_logging, resolve_log_level
from .revisions import RevisionConfig, get_revision_config
from .storage import DatabaseConfig, get_data_dir, get_database_config, sqlite_uri

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "RevisionConfig",
    "configure_logging",
    "env_flag",
    "get_data_dir",
    "get_database_config",
    "get_revision_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
    "resolve_log_level",
    "sqlite_uri",
]
