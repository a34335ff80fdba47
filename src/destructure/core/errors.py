"""Error types for pattern construction.

Match failure is never an exception; see ``destructure.core.binding.Failure``.
"""

from __future__ import annotations

from typing import Any


class DestructureError(Exception):
    """Base class for destructure errors."""


class PatternError(DestructureError):
    """Pattern builder misuse."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidVariableName(PatternError):
    """Variable names must be non-empty strings."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Invalid variable name: {name!r}", name)


class ArenaFrozen(PatternError):
    """A token was requested after the pattern finished compiling."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot allocate variable {name!r}: pattern already compiled", name)


class UnknownStrategy(PatternError):
    """Sequence strategy name not recognised."""

    def __init__(self, strategy: Any):
        self.strategy = strategy
        super().__init__(f"Unknown sequence strategy: {strategy!r}", strategy)
