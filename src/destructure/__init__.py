"""Structural pattern matching over plain Python data.

    >>> from destructure import REST, Failure, compile
    >>> head = compile(lambda ctx: [ctx.var("first"), ctx.rest])
    >>> head(["one", "dos", "drie"])["first"]
    'one'
    >>> head("not a list") is Failure
    True
"""

from loguru import logger

from destructure.core import (
    REST,
    Binding,
    BuilderContext,
    DestructureError,
    Failure,
    Matcher,
    MatchResult,
    PatternError,
    SequenceStrategy,
    Token,
    compile_pattern,
)

logger.disable("destructure")

compile = compile_pattern
pattern = compile_pattern

__all__ = [
    "REST",
    "Binding",
    "BuilderContext",
    "DestructureError",
    "Failure",
    "MatchResult",
    "Matcher",
    "PatternError",
    "SequenceStrategy",
    "Token",
    "compile",
    "compile_pattern",
    "pattern",
]
