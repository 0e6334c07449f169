# src/jivox/errors.py

"""
Error taxonomy.

Every error carries a message that is safe to show to the user as-is.
The Engine is the only place that turns these into response strings.
"""

from __future__ import annotations


class JivoxError(Exception):
    """Base class for all user-facing errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(JivoxError):
    """Malformed command arguments, bad dates, inverted intervals, unknown commands."""


class TaskIndexError(JivoxError, IndexError):
    """A task reference outside the current list."""


class DataHandlerError(JivoxError):
    """Persistence read/write failure or a corrupt stored record."""
