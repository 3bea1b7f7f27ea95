"""Missive exception hierarchy.

Shared across the header model, the reference message, and the
conformance harness so every module raises and catches the same types.

Header validation raises exactly two kinds: ``HeaderTypeError`` (a
``TypeError``) when a name or value has the wrong type, and
``InvalidHeaderError`` (a ``ValueError``) when it has the right type but
unacceptable content.
"""

from dataclasses import dataclass


class MissiveError(Exception):
    """Base for all missive-specific errors."""


class ConfigurationError(MissiveError):
    """Raised when harness configuration is invalid.

    Typically raised by ``HarnessConfig`` for an unknown probe name in
    the skip-list.
    """


class HeaderTypeError(MissiveError, TypeError):
    """A header name or value is not of an accepted type."""


@dataclass(frozen=True, slots=True)
class InvalidHeaderError(MissiveError, ValueError):
    """A header name or value has an accepted type but invalid content.

    ``name`` is the offending header name as given (may be empty).
    """

    name: str
    reason: str

    def __str__(self) -> str:
        if self.name:
            return f"Invalid header {self.name!r}: {self.reason}"
        return f"Invalid header: {self.reason}"
