"""Positional matching of ordered sequences."""

from __future__ import annotations

import array
from collections.abc import Sequence as SequenceABC
from enum import StrEnum
from typing import Any, Callable

from destructure.core.binding import Binding, Failure, MatchResult
from destructure.core.errors import UnknownStrategy
from destructure.core.patterns import Pattern, Rest, Sequence

MatchFn = Callable[[Pattern, Any], MatchResult]

SEQUENCE_SUBJECT_TYPES: tuple[type, ...] = (SequenceABC, bytearray, array.array, memoryview)


class SequenceStrategy(StrEnum):
    """How sequence patterns are aligned with their subjects.

    STRICT walks pattern and subject once from the first element and requires
    the subject to be consumed completely. SEARCH retries the same walk from
    every start offset, accepts trailing subject elements, and returns the
    first success. SEARCH costs O(n*m).
    """

    STRICT = "strict"
    SEARCH = "search"


def coerce_strategy(value: SequenceStrategy | str) -> SequenceStrategy:
    try:
        return SequenceStrategy(value)
    except ValueError:
        raise UnknownStrategy(value) from None


def is_sequence_subject(subject: Any) -> bool:
    if isinstance(subject, str):
        return False
    return isinstance(subject, SEQUENCE_SUBJECT_TYPES)


def match_sequence(
    node: Sequence,
    subject: Any,
    strategy: SequenceStrategy,
    match: MatchFn,
) -> MatchResult:
    """Match a sequence pattern, delegating elements back to ``match``."""
    if not is_sequence_subject(subject):
        return Failure
    if strategy is SequenceStrategy.SEARCH:
        for start in range(len(subject) + 1):
            result = _sweep(node, subject, start, match, exhaustive=False)
            if result is not Failure:
                return result
        return Failure
    return _sweep(node, subject, 0, match, exhaustive=True)


def _sweep(
    node: Sequence,
    subject: Any,
    start: int,
    match: MatchFn,
    *,
    exhaustive: bool,
) -> MatchResult:
    """Single left-to-right pass pairing pattern items with subject items.

    A rest item absorbs as many elements as leaves exactly one subject element
    for each pattern item after it.
    """
    items = node.items
    length = len(subject)
    index = start
    result = Binding.empty()

    for position, item in enumerate(items):
        if index >= length:
            return Failure

        if isinstance(item, Rest):
            span = length - index - (len(items) - position - 1)
            if span < 0:
                return Failure
            increment = Binding.singleton(item.token, subject[index : index + span])
            index += span
        else:
            increment = match(item, subject[index])
            index += 1

        if increment is Failure:
            return Failure
        result = result.merge(increment)
        if result is Failure:
            return Failure

    if exhaustive and index != length:
        return Failure
    return result
