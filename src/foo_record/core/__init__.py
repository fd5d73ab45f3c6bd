"""Core layer — pure record model, parsing and validation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``config``.
"""

from foo_record.core.age_parser import parse_age, parse_age_permissive, parse_age_strict
from foo_record.core.factory import new_foo
from foo_record.core.models import DEFAULT_AGE_LIMITS, AgeLimits, Foo

__all__: list[str] = [
    "DEFAULT_AGE_LIMITS",
    "AgeLimits",
    "Foo",
    "new_foo",
    "parse_age",
    "parse_age_permissive",
    "parse_age_strict",
]
