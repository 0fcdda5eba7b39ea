"""Exception hierarchy for smartdocs."""

from __future__ import annotations


class SmartDocsError(Exception):
    """Base class for errors raised by smartdocs."""


class UnsupportedLanguageError(SmartDocsError):
    """Raised when no grammar is registered for a language."""

    def __init__(self, language: object) -> None:
        self.language = language
        super().__init__(f"No grammar registered for language: {language}")


class ParseFailure(SmartDocsError):
    """Raised when a single file cannot be parsed or analyzed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InvalidArgumentError(SmartDocsError, ValueError):
    """Raised when an analysis request is rejected before any file I/O."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class ConfigError(SmartDocsError):
    """Raised when the configuration file cannot be parsed."""


__all__ = [
    "ConfigError",
    "InvalidArgumentError",
    "ParseFailure",
    "SmartDocsError",
    "UnsupportedLanguageError",
]
