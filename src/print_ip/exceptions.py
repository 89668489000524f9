"""Custom exception hierarchy for print-ip.

All exceptions that cross layer boundaries must inherit from
:class:`PrintIpError`.  Type problems are detected by a validation pass
that runs before any output is produced, so a raised error always means
nothing was written.

Hierarchy
---------
PrintIpError
├── UnsupportedTypeError
├── HeterogeneousTupleError
├── HeterogeneousSequenceError
├── IntegerRangeError
├── InvalidArgumentError
└── EnvironmentError
"""

from __future__ import annotations


class PrintIpError(Exception):
    """Base exception for all print-ip errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Shape selection -------------------------------------------------------

class UnsupportedTypeError(PrintIpError, TypeError):
    """Raised when a value matches none of the renderable shapes."""


class HeterogeneousTupleError(PrintIpError, TypeError):
    """Raised when a tuple's members are not all of one type."""


class HeterogeneousSequenceError(PrintIpError, TypeError):
    """Raised when a sequence's elements are not all of one type."""


# --- Value construction ----------------------------------------------------

class IntegerRangeError(PrintIpError, ValueError):
    """Raised when a value does not fit the requested fixed-width integer."""


class InvalidArgumentError(PrintIpError):
    """Raised when a command-line value cannot be converted."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PrintIpError):
    """Raised when an optional runtime dependency is not available."""


def describe_type(value: object) -> str:
    """Return the qualified type name of *value* for error messages."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
