"""Validated construction of :class:`~foo_record.core.models.Foo` records.

:func:`new_foo` is the only supported way to obtain a record whose
invariants hold.  Checks run in a fixed order so the reported error is
deterministic for any input:

1. name present
2. age text present
3. age text parses (strict mode only)
4. hard limit
5. soft limit
6. allocation

Guarantees
----------
* No ``print()`` — failures are raised as typed
  :class:`~foo_record.exceptions.FooError` subclasses.
* Rejections are logged at DEBUG level on the ``foo_record`` logger.
"""

from __future__ import annotations

import logging

from foo_record.core.age_parser import parse_age
from foo_record.core.models import DEFAULT_AGE_LIMITS, AgeLimits, Foo
from foo_record.exceptions import (
    AgeTooLargeError,
    AllocationFailureError,
    InvalidAgeError,
    MissingAgeError,
    MissingNameError,
)

logger = logging.getLogger(__name__)


def new_foo(
    name: str | None,
    age_str: str | None,
    *,
    strict: bool = False,
    limits: AgeLimits = DEFAULT_AGE_LIMITS,
) -> Foo:
    """Validate raw text inputs and build a :class:`Foo`.

    Parameters
    ----------
    name:
        Display name.  ``None`` and ``""`` count as absent.
    age_str:
        Age as text.  ``None`` and ``""`` count as absent.
    strict:
        Reject age text that is not a whole number instead of reading its
        leading digits.
    limits:
        Hard and soft bounds applied to the parsed age.

    Raises
    ------
    MissingNameError
        If *name* is absent.
    MissingAgeError
        If *age_str* is absent.
    AgeParseError
        If *strict* is set and *age_str* is not a whole number.
    InvalidAgeError
        If the age is ``<= 0`` or ``>= limits.hard_max``.
    AgeTooLargeError
        If the age is above ``limits.soft_max``.
    AllocationFailureError
        If the record cannot be allocated.
    """
    if not name:
        logger.debug("Rejected record: missing name")
        raise MissingNameError()

    if not age_str:
        logger.debug("Rejected record: missing age")
        raise MissingAgeError()

    age = parse_age(age_str, strict=strict)

    # Check hard limits
    if age <= 0 or age >= limits.hard_max:
        logger.debug("Rejected record: age %d outside hard limit", age)
        raise InvalidAgeError(age)

    # Check soft limit
    if age > limits.soft_max:
        logger.debug("Rejected record: age %d above soft limit %d", age, limits.soft_max)
        raise AgeTooLargeError(age, hint=f"Ages above {limits.soft_max} are not accepted.")

    try:
        foo = Foo(name=name, age=age)
    except MemoryError as exc:
        raise AllocationFailureError() from exc

    logger.debug("Created record name=%r age=%d", foo.name, foo.age)
    return foo
