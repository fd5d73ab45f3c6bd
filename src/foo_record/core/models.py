"""Domain models for foo-record.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Foo:
    """A validated name/age record.

    Build instances through :func:`foo_record.core.factory.new_foo`; the
    dataclass itself performs no validation.
    """

    name: str
    """Non-empty display name."""

    age: int
    """Age in years, within ``[1, 120]`` for records built by ``new_foo``."""


# ---------------------------------------------------------------------------
# Validation bounds
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AgeLimits:
    """Bounds applied to a parsed age.

    Ages ``<= 0`` or ``>= hard_max`` are structurally invalid.  Ages above
    ``soft_max`` but under ``hard_max`` are rejected as implausible.
    """

    hard_max: int = 127
    """Exclusive hard bound (maximum of a signed char)."""

    soft_max: int = 120
    """Inclusive plausibility bound."""


DEFAULT_AGE_LIMITS = AgeLimits()
