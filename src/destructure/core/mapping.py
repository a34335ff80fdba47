"""Matching of keyed structures."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import Any

from destructure.core.binding import Binding, Failure, MatchResult
from destructure.core.patterns import Mapping
from destructure.core.sequence import MatchFn


def match_mapping(node: Mapping, subject: Any, match: MatchFn) -> MatchResult:
    """Match a keyed pattern against a mapping subject.

    Every entry key must be present in the subject. Keys the entries did not
    visit are gathered, in the subject's own order, into a dict that the rest
    target is matched against. Object attributes are never consulted.
    """
    if not isinstance(subject, MappingABC):
        return Failure

    result = Binding.empty()
    visited = set()
    for key, value_pattern in node.entries:
        if key not in subject:
            return Failure
        visited.add(key)
        increment = match(value_pattern, subject[key])
        if increment is Failure:
            return Failure
        result = result.merge(increment)
        if result is Failure:
            return Failure

    if node.rest is None:
        return result

    remainder = {key: value for key, value in subject.items() if key not in visited}
    increment = match(node.rest, remainder)
    if increment is Failure:
        return Failure
    return result.merge(increment)
