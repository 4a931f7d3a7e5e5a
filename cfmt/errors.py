"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from CFUserError.

Programming errors and bugs should NOT inherit from CFUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations


class CFUserError(Exception):
    """
    Base class for all user-facing errors in cfmt.

    These errors indicate problems that the user can fix:
    a template referencing unknown keys, malformed alignment
    or format fields, invalid configuration files.
    """
    pass


class KeyNotFoundError(CFUserError, KeyError):
    """Raised when the substitution source has no value for a placeholder key."""
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key not found: {key}")

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return self.args[0]


class InvalidAlignmentError(CFUserError, ValueError):
    """Raised when an alignment field is not a valid integer."""
    def __init__(self, alignment: str):
        self.alignment = alignment
        super().__init__(f"Invalid alignment: {alignment}")


class InvalidFormatError(CFUserError, ValueError):
    """Raised when a format specifier does not apply to the resolved value."""
    def __init__(self, format: str, kind: str = "numeric"):
        self.format = format
        self.kind = kind
        super().__init__(f"Invalid format string for {kind} type: {format}")


class ConfigError(CFUserError, ValueError):
    """Invalid configuration or variables file."""
    pass


__all__ = [
    "CFUserError",
    "KeyNotFoundError",
    "InvalidAlignmentError",
    "InvalidFormatError",
    "ConfigError",
]
