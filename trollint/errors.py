# trollint/errors.py

from __future__ import annotations


class TrollintError(Exception):
    """Base class for errors raised by the suggestion engine."""


class InvalidQueryError(TrollintError, ValueError):
    """A fishing-conditions query is out of range. Raised before any scoring."""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid query field '{field}' = {value!r}: {reason}")


class CatalogError(TrollintError, ValueError):
    """A catalog record is malformed or uses an unknown vocabulary value."""
