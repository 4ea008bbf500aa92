"""Exception types and error classification for the lint tasks.

Classifies exceptions by category to enable:
- Distinct user messages (broken registry vs unsupported input)
- Stable CLI exit codes per category
"""

from __future__ import annotations

from enum import Enum

from extlint.constants import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_UNSUPPORTED_INPUT,
)


class ExtlintError(Exception):
    """Base class for all errors raised by extlint."""


class ConfigurationError(ExtlintError):
    """The connector registry or the manifest is missing or malformed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class UnsupportedInputError(ExtlintError):
    """A file was delivered in a form the detector cannot inspect."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ErrorClass(Enum):
    CONFIGURATION = "configuration"  # broken registry or manifest
    UNSUPPORTED_INPUT = "unsupported_input"  # streamed contents
    UNKNOWN = "unknown"  # unclassified


def classify_error(error: Exception) -> ErrorClass:
    """Classify an error to pick the user message and exit code."""
    if isinstance(error, ConfigurationError):
        return ErrorClass.CONFIGURATION
    if isinstance(error, UnsupportedInputError):
        return ErrorClass.UNSUPPORTED_INPUT
    return ErrorClass.UNKNOWN


_EXIT_CODES = {
    ErrorClass.CONFIGURATION: EXIT_CONFIGURATION_ERROR,
    ErrorClass.UNSUPPORTED_INPUT: EXIT_UNSUPPORTED_INPUT,
}


def exit_code_for(error: Exception) -> int | None:
    """Return the CLI exit code for a known error, ``None`` otherwise."""
    return _EXIT_CODES.get(classify_error(error))
