"""Errors raised while reading revisionable settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Base class for settings problems detected at start-up."""


class MissingConfigurationError(ConfigurationError):
    """A required environment variable is unset or blank."""


class InvalidConfigurationError(ConfigurationError):
    """An environment variable is set but cannot be used."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name}={value!r}: {reason}")
        self.name = name
        self.value = value
