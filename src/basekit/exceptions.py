"""Exception hierarchy for basekit.

Every exception raised by this library inherits from
:class:`BasekitError`.  Malformed input to the record generator is not
wrapped: it surfaces as the plain ``TypeError`` / ``ValueError`` raised
by :mod:`dataclasses`.

Hierarchy
---------
BasekitError
├── InternalError
├── ReadOnlyFieldError      (also a dataclasses.FrozenInstanceError)
└── DependencyMissingError
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError


class BasekitError(Exception):
    """Base exception for all basekit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Programmer errors -----------------------------------------------------

class InternalError(BasekitError):
    """A logic fault in the program itself, not a recoverable condition.

    The rendered message is exactly :attr:`reason`.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason: str = reason


def internal_error(reason: str) -> InternalError:
    """Build an :class:`InternalError` for *reason*.

    The error is returned, not raised, so call sites read
    ``raise internal_error("unreachable branch")``.
    """
    return InternalError(reason)


# --- Records ---------------------------------------------------------------

class ReadOnlyFieldError(BasekitError, FrozenInstanceError):
    """Raised on an attempt to assign or delete a read-only record field."""

    def __init__(self, record: str, field_name: str) -> None:
        super().__init__(f"cannot assign to read-only field {record}.{field_name}")
        self.record: str = record
        self.field_name: str = field_name


# --- Environment -----------------------------------------------------------

class DependencyMissingError(BasekitError):
    """Raised when an optional third-party dependency is required but absent."""
