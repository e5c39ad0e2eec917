"""Exceptions raised by kss."""

from __future__ import annotations


class KssError(Exception):
    """Base class for all kss errors."""


class KssInputError(KssError, TypeError):
    """Raised when parse() is given input of an unsupported shape."""


class KssConfigError(KssError, ValueError):
    """Raised when a configuration file cannot be used."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
