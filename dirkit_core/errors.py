"""Typed errors raised by dirkit."""

from __future__ import annotations


class DirkitError(Exception):
    """Base type for dirkit failures."""


class MissingEnvironmentVariableError(DirkitError, LookupError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Environment variable {name!r} is missing!")
        self.name = name


class UnsupportedDirectoryError(DirkitError):
    """Raised when a directory kind or modifier cannot be resolved."""


class ConfigError(DirkitError):
    """Raised when the settings file cannot be loaded."""
