"""Pattern compiler: builder callbacks to reusable matchers."""

from __future__ import annotations

import array
import inspect
import re
from collections.abc import Mapping as MappingABC
from datetime import date
from typing import Any, Callable

from loguru import logger

from destructure.core.binding import Failure, MatchResult
from destructure.core.dispatch import match_node
from destructure.core.errors import ArenaFrozen, InvalidVariableName
from destructure.core.patterns import (
    REST,
    Literal,
    LiteralDate,
    LiteralRegex,
    Mapping,
    Pattern,
    Rest,
    Sequence,
    Spread,
    Token,
    Variable,
)
from destructure.core.sequence import SequenceStrategy, coerce_strategy

SEQUENCE_PATTERN_TYPES: tuple[type, ...] = (list, tuple, bytearray, array.array, memoryview)


class TokenArena:
    """Tokens allocated for one pattern, one per distinct variable name."""

    def __init__(self) -> None:
        self._tokens: dict[str, Token] = {}
        self._frozen = False

    def allocate(self, name: str) -> Token:
        """Return the token for ``name``, creating it on first use."""
        if not isinstance(name, str) or not name:
            raise InvalidVariableName(name)
        token = self._tokens.get(name)
        if token is None:
            if self._frozen:
                raise ArenaFrozen(name)
            token = Token(name)
            self._tokens[name] = token
        return token

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def reverse(self) -> dict[Token, str]:
        """Token to name table."""
        return {token: name for name, token in self._tokens.items()}

    def __len__(self) -> int:
        return len(self._tokens)


class BuilderContext:
    """Handed to pattern builders.

    ``var`` (alias ``sym``) returns the same token for the same name within
    one builder call. ``rest`` is the rest token; ``rest_as(name)`` is a rest
    marker reported under ``name`` instead.
    """

    def __init__(self, arena: TokenArena) -> None:
        self._arena = arena

    def var(self, name: str) -> Token:
        return self._arena.allocate(name)

    sym = var

    @property
    def rest(self) -> Token:
        return REST

    def rest_as(self, name: str) -> Spread:
        return Spread(self._arena.allocate(name))


Builder = Callable[..., Any]


class Matcher:
    """A compiled pattern. Calling it matches a subject.

    Returns a Binding keyed by variable name (``REST`` for anonymous rest
    captures) or ``Failure``. Matchers hold no per-call state.
    """

    def __init__(self, pattern: Pattern, tokens: dict[Token, str], strategy: SequenceStrategy) -> None:
        self.pattern = pattern
        self.tokens = tokens
        self.strategy = strategy

    def match(self, subject: Any) -> MatchResult:
        result = match_node(self.pattern, subject, self.strategy)
        logger.trace("pattern.match pattern={} matched={}", self.pattern, bool(result))
        if result is Failure:
            return result
        return result.named(self.tokens)

    __call__ = match

    def __repr__(self) -> str:
        return f"Matcher({self.pattern}, strategy={self.strategy.value})"


def lower(raw: Any) -> Pattern:
    """Convert a builder's raw return value into pattern nodes."""
    match raw:
        case Pattern():
            return raw
        case Spread(token):
            return Rest(token)
        case Token() if raw is REST:
            return Rest(REST)
        case Token():
            return Variable(raw)
        case date():
            return LiteralDate(raw)
        case re.Pattern():
            return LiteralRegex(raw)
        case MappingABC():
            return _lower_mapping(raw)
        case _ if isinstance(raw, SEQUENCE_PATTERN_TYPES):
            return _lower_sequence(raw)
        case _:
            return Literal(raw)


def _lower_sequence(raw: Any) -> Sequence:
    items = tuple(lower(item) for item in raw)
    rests = sum(1 for item in items if isinstance(item, Rest))
    if rests > 1:
        logger.warning("pattern.compile.multiple_rest count={} pattern={}", rests, raw)
    return Sequence(items)


def _lower_mapping(raw: MappingABC) -> Mapping:
    entries: list[tuple[Any, Pattern]] = []
    rest: Pattern | None = None
    keys = list(raw.keys())
    for position, key in enumerate(keys):
        if key is REST:
            rest = lower(raw[key])
            ignored = keys[position + 1 :]
            if ignored:
                logger.warning("pattern.compile.ignored_keys keys={}", ignored)
            break
        entries.append((key, lower(raw[key])))
    return Mapping(tuple(entries), rest)


def compile_pattern(builder: Builder, *, strategy: SequenceStrategy | str | None = None) -> Matcher:
    """Compile a pattern builder into a reusable ``Matcher``.

    Args:
        builder: Called once with a ``BuilderContext`` (or with no arguments
            if it accepts none); returns the raw pattern.
        strategy: Sequence strategy; defaults to the configured
            ``sequence_strategy``.

    Raises:
        PatternError: On an invalid variable name or unknown strategy.
    """
    if strategy is None:
        from destructure.config.settings import load_settings

        strategy = load_settings().sequence_strategy
    resolved = coerce_strategy(strategy)

    arena = TokenArena()
    context = BuilderContext(arena)
    raw = builder(context) if _accepts_context(builder) else builder()
    pattern = lower(raw)
    arena.freeze()

    tokens = arena.reverse()
    logger.debug(
        "pattern.compile pattern={} vars={} strategy={}",
        pattern,
        ",".join(tokens.values()) or "<none>",
        resolved.value,
    )
    return Matcher(pattern, tokens, resolved)


def _accepts_context(builder: Builder) -> bool:
    try:
        signature = inspect.signature(builder)
    except (TypeError, ValueError):
        return True
    return bool(signature.parameters)
