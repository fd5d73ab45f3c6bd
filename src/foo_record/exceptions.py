"""Custom exception hierarchy for foo-record.

Every user-visible failure inherits from :class:`FooError` so the CLI
error boundary can render a single ``ERROR:`` line without leaking a
stack trace.  The message of each validation error is the exact text
shown to the user.

Hierarchy
---------
FooError
├── UsageError
├── ValidationError
│   ├── MissingNameError
│   ├── MissingAgeError
│   ├── AgeParseError
│   ├── InvalidAgeError
│   └── AgeTooLargeError
├── AllocationFailureError
└── EnvironmentError
"""

from __future__ import annotations


class FooError(Exception):
    """Base exception for all foo-record errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ------------------------------------------------------------

class UsageError(FooError):
    """Raised when the command line has the wrong shape.

    The message is the full usage line, e.g. ``usage: foo <name> <age>``.
    """


# --- Record validation -------------------------------------------------------

class ValidationError(FooError):
    """Base for input that cannot become a valid :class:`~foo_record.core.models.Foo`."""


class MissingNameError(ValidationError):
    """Raised when the name is absent or empty."""

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__("need non blank name", hint=hint)


class MissingAgeError(ValidationError):
    """Raised when the age text is absent or empty."""

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__("need non blank age", hint=hint)


class AgeParseError(ValidationError):
    """Raised in strict mode when the age text is not a whole number."""

    def __init__(self, age_str: str, *, hint: str | None = None) -> None:
        super().__init__(f"age must be a whole number, got {age_str!r}", hint=hint)
        self.age_str: str = age_str


class InvalidAgeError(ValidationError):
    """Raised when the parsed age breaks the hard limit."""

    def __init__(self, age: int, *, hint: str | None = None) -> None:
        super().__init__("invalid age", hint=hint)
        self.age: int = age


class AgeTooLargeError(ValidationError):
    """Raised when the parsed age is within the hard limit but implausible."""

    def __init__(self, age: int, *, hint: str | None = None) -> None:
        super().__init__("nobody's that old!", hint=hint)
        self.age: int = age


# --- Resources ---------------------------------------------------------------

class AllocationFailureError(FooError):
    """Raised when storage for the record cannot be obtained."""

    def __init__(self, *, hint: str | None = None) -> None:
        super().__init__("failed to allocate space for Foo/name", hint=hint)


class EnvironmentError(FooError):
    """Raised when an optional runtime dependency is not available."""
