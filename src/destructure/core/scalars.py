"""Equality rules for scalar and special literal patterns."""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from fractions import Fraction
from typing import Any

# Compared by exact type and value; every other value is compared by identity.
SCALAR_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
)


def is_scalar(value: Any) -> bool:
    return type(value) in SCALAR_TYPES


def strict_equal(left: Any, right: Any) -> bool:
    """Strict equality without coercion.

    Scalars are equal when they share an exact type and compare equal, so
    ``1`` never equals ``1.0`` or ``True`` and NaN never equals itself.
    Anything else is equal only to itself.
    """
    if is_scalar(left):
        return type(left) is type(right) and left == right
    return left is right


def match_date(pattern: date, subject: Any) -> bool:
    """Dates match by instant, never by reference.

    A ``date`` and a ``datetime`` never match each other; neither do naive
    and aware datetimes.
    """
    if not isinstance(subject, date):
        return False
    if isinstance(pattern, datetime) != isinstance(subject, datetime):
        return False
    if isinstance(pattern, datetime):
        if (pattern.utcoffset() is None) != (subject.utcoffset() is None):
            return False
    return pattern == subject


def match_regex(pattern: re.Pattern, subject: Any) -> bool:
    """A regex matches a regex with the same source, or any text it finds."""
    if isinstance(subject, re.Pattern):
        if subject.pattern == pattern.pattern:
            return True
    return pattern.search(_as_text(pattern, subject)) is not None


def _as_text(pattern: re.Pattern, subject: Any) -> str | bytes:
    if isinstance(pattern.pattern, bytes):
        if isinstance(subject, (bytes, bytearray)):
            return bytes(subject)
        return str(subject).encode("utf-8")
    if isinstance(subject, re.Pattern):
        return str(subject.pattern)
    return str(subject)
