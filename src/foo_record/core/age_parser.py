"""Pure text → integer age parsing.

Two policies are offered:

1. **Permissive** (:func:`parse_age_permissive`) — C ``atoi`` semantics.
   Leading whitespace and one sign are accepted, the longest run of ASCII
   digits is read, and trailing text is ignored.  Input with no leading
   number parses as ``0``.
2. **Strict** (:func:`parse_age_strict`) — the whole text must be a
   signed whole number; anything else raises
   :class:`~foo_record.exceptions.AgeParseError`.

No I/O, no side effects.
"""

from __future__ import annotations

import re

from foo_record.exceptions import AgeParseError

# the C isspace() set; narrower than \s, which also matches Unicode spaces
_SPACE = r"[ \t\n\v\f\r]*"
_LEADING_NUMBER = re.compile(_SPACE + r"([+-]?[0-9]+)")
_WHOLE_NUMBER = re.compile(_SPACE + r"([+-]?[0-9]+)" + _SPACE)


def parse_age_permissive(age_str: str) -> int:
    """Parse the leading integer of *age_str*, or return ``0``.

    >>> parse_age_permissive("  42 years")
    42
    >>> parse_age_permissive("abc")
    0
    """
    match = _LEADING_NUMBER.match(age_str)
    if match is None:
        return 0
    return int(match.group(1))


def parse_age_strict(age_str: str) -> int:
    """Parse *age_str* as a whole number.

    Raises
    ------
    AgeParseError
        If *age_str* contains anything besides an optionally signed run of
        ASCII digits and surrounding C whitespace.
    """
    match = _WHOLE_NUMBER.fullmatch(age_str)
    if match is None:
        raise AgeParseError(
            age_str,
            hint="Pass the age as digits only, e.g. 42.",
        )
    return int(match.group(1))


def parse_age(age_str: str, *, strict: bool = False) -> int:
    """Dispatch to the strict or permissive parser."""
    if strict:
        return parse_age_strict(age_str)
    return parse_age_permissive(age_str)
