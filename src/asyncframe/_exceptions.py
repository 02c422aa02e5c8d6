"""
Exception types raised by asyncframe.

All errors derive from the built-in exception a caller would naturally catch:
configuration problems are ``ValueError`` and missing columns are ``KeyError``.
"""

from __future__ import annotations

import difflib
from typing import Iterable


class ConfigurationError(ValueError):
    """Raised synchronously when a frame is constructed from a malformed configuration."""


class MissingColumnError(KeyError):
    """Raised when a column is requested that the frame does not have."""

    def __init__(self, column: str, message: str) -> None:
        super().__init__(message)
        self.column = column

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


def create_keyerror_with_suggestions(
    column: str, available: Iterable[str], max_suggestions: int = 3
) -> MissingColumnError:
    """
    Build a :class:`MissingColumnError` naming close matches among ``available``.

    Parameters
    ----------
    column : str
        The column that was requested.
    available : iterable of str
        Column names the frame does have.
    max_suggestions : int, default 3
        Maximum number of close matches to mention.

    Returns
    -------
    MissingColumnError
        The error, ready to be raised.
    """
    available = list(available)
    message = f"Column '{column}' not found."
    suggestions = difflib.get_close_matches(column, available, n=max_suggestions)
    if suggestions:
        quoted = ", ".join(f"'{name}'" for name in suggestions)
        message += f" Did you mean: {quoted}?"
    elif available:
        message += f" Available columns: {available}"
    return MissingColumnError(column, message)
