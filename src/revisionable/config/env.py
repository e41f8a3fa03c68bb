"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from .errors import InvalidConfigurationError, MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

_TRUE_FLAGS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_FLAGS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def _read(name: str) -> str | None:
    """Return the variable's value, or ``None`` when it is unset or blank."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise naming every missing one."""

    values = {name: _read(name) for name in names}
    missing = sorted(name for name, value in values.items() if value is None)
    if missing:
        raise MissingConfigurationError(f"Missing configuration for: {', '.join(missing)}")
    return {name: value for name, value in values.items() if value is not None}


def require_env_var(name: str) -> str:
    return require_env_vars([name])[name]


def optional_env_var(name: str, default: str) -> str:
    value = _read(name)
    return default if value is None else value


def env_flag(name: str, *, default: bool = False) -> bool:
    """Read an on/off switch such as ``REVISIONABLE_DB_ECHO=1``."""

    value = _read(name)
    if value is None:
        return default
    normalised = value.strip().lower()
    if normalised in _TRUE_FLAGS:
        return True
    if normalised in _FALSE_FLAGS:
        return False
    raise InvalidConfigurationError(name, value, "expected one of 1/0, true/false, yes/no, on/off")
