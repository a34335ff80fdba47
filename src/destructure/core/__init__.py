"""Matching engine: pattern nodes, bindings, dispatch and compiler."""

from destructure.core.binding import Binding, Failure, FailureType, MatchResult
from destructure.core.compiler import BuilderContext, Matcher, TokenArena, compile_pattern, lower
from destructure.core.dispatch import match_node
from destructure.core.errors import (
    ArenaFrozen,
    DestructureError,
    InvalidVariableName,
    PatternError,
    UnknownStrategy,
)
from destructure.core.patterns import (
    REST,
    Literal,
    LiteralDate,
    LiteralRegex,
    Mapping,
    Pattern,
    Rest,
    RestToken,
    Sequence,
    Spread,
    Token,
    Variable,
)
from destructure.core.scalars import strict_equal
from destructure.core.sequence import SequenceStrategy

__all__ = [
    # Patterns
    "Pattern",
    "Literal",
    "LiteralDate",
    "LiteralRegex",
    "Variable",
    "Rest",
    "Sequence",
    "Mapping",
    "Token",
    "RestToken",
    "REST",
    "Spread",
    # Results
    "Binding",
    "Failure",
    "FailureType",
    "MatchResult",
    "strict_equal",
    # Compiler
    "BuilderContext",
    "Matcher",
    "TokenArena",
    "SequenceStrategy",
    "compile_pattern",
    "lower",
    "match_node",
    # Errors
    "DestructureError",
    "PatternError",
    "InvalidVariableName",
    "ArenaFrozen",
    "UnknownStrategy",
]
