"""Run settings passed explicitly to the CLI driver."""

from __future__ import annotations

from dataclasses import dataclass, field

from foo_record.core.models import DEFAULT_AGE_LIMITS, AgeLimits


@dataclass(frozen=True, slots=True)
class FooSettings:
    """Immutable settings for a single run.

    The command line carries only ``<name> <age>``, so the ``foo`` script
    always runs with the defaults; embedding callers pass their own
    instance to :func:`foo_record.cli.app.main`.
    """

    strict: bool = False
    """Reject age text that is not a whole number."""

    verbose: bool = False
    """Emit DEBUG-level log lines."""

    log_json: bool = False
    """Render log lines as JSON instead of the console format."""

    limits: AgeLimits = field(default=DEFAULT_AGE_LIMITS)
    """Hard and soft age bounds."""
