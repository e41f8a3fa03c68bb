"""Logging setup for applications embedding revisionable."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import InvalidConfigurationError

LOG_LEVEL_ENV = "REVISIONABLE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(level: int | str | None = None) -> int:
    """Turn ``level`` (or ``REVISIONABLE_LOG_LEVEL``) into a logging level number."""

    if isinstance(level, int):
        return level
    name = (level or optional_env_var(LOG_LEVEL_ENV, "INFO")).strip().upper()
    resolved = logging.getLevelNamesMapping().get(name)
    if resolved is None:
        raise InvalidConfigurationError(LOG_LEVEL_ENV, name, "unknown log level")
    return resolved


def configure_logging(*, level: int | str | None = None, force: bool = False) -> None:
    """Configure the root logger with a terse format.

    Does nothing when the root logger already has handlers, unless ``force``
    is set.
    """

    logging.basicConfig(
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
