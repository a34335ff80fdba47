"""Pattern dispatch: routes each pattern node to its matcher."""

from __future__ import annotations

from functools import partial
from typing import Any

from destructure.core.binding import Binding, Failure, MatchResult
from destructure.core.mapping import match_mapping
from destructure.core.patterns import (
    Literal,
    LiteralDate,
    LiteralRegex,
    Mapping,
    Pattern,
    Rest,
    Sequence,
    Variable,
)
from destructure.core.scalars import match_date, match_regex, strict_equal
from destructure.core.sequence import SequenceStrategy, match_sequence


def match_node(
    pattern: Pattern,
    subject: Any,
    strategy: SequenceStrategy = SequenceStrategy.STRICT,
) -> MatchResult:
    """Match ``subject`` against a compiled pattern node.

    Returns a (possibly empty) Binding on success or ``Failure``.
    Unrecognised node types fail rather than falling through.
    """
    match pattern:
        case Variable(token) | Rest(token):
            return Binding.singleton(token, subject)
        case Literal(None):
            return _verdict(subject is None)
        case LiteralDate(value):
            return _verdict(match_date(value, subject))
        case LiteralRegex(value):
            return _verdict(match_regex(value, subject))
        case Sequence():
            return match_sequence(pattern, subject, strategy, partial(match_node, strategy=strategy))
        case Mapping():
            return match_mapping(pattern, subject, partial(match_node, strategy=strategy))
        case Literal(value):
            return _verdict(strict_equal(value, subject))
        case _:
            return Failure


def _verdict(matched: bool) -> MatchResult:
    return Binding.empty() if matched else Failure
