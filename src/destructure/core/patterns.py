"""Pattern node representations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Hashable, Union


class Token:
    """Opaque variable identity allocated by the compiler.

    Tokens compare by identity: two tokens with the same name from different
    compilations are different variables.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Token({self.name!r})"


class RestToken(Token):
    """The singleton rest token."""

    __slots__ = ()

    _instance: RestToken | None = None

    def __new__(cls) -> RestToken:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        super().__init__("$rest")

    def __repr__(self) -> str:
        return "REST"

    def __reduce__(self) -> str:
        return "REST"


REST = RestToken()


@dataclass(frozen=True)
class Spread:
    """Rest marker reporting its remainder under a named token."""

    token: Token

    def __str__(self) -> str:
        return f"...{self.token.name}"


class Pattern:
    """Base class for pattern nodes."""


@dataclass(frozen=True)
class Literal(Pattern):
    """Matches a value strictly equal to ``value``."""

    value: Any

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class LiteralDate(Pattern):
    """Matches a date or datetime at the same instant."""

    value: date

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class LiteralRegex(Pattern):
    """Matches a regex with the same source, or text the regex finds."""

    value: re.Pattern

    def __str__(self) -> str:
        return f"/{self.value.pattern}/"


@dataclass(frozen=True)
class Variable(Pattern):
    """Binds the subject to ``token``."""

    token: Token

    def __str__(self) -> str:
        return f"?{self.token.name}"


@dataclass(frozen=True)
class Rest(Pattern):
    """Binds the unmatched remainder of the enclosing container."""

    token: Token = REST

    def __str__(self) -> str:
        if self.token is REST:
            return "..."
        return f"...{self.token.name}"


@dataclass(frozen=True)
class Sequence(Pattern):
    """Positional pattern over ordered, indexable subjects."""

    items: tuple[Pattern, ...]

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.items) + "]"


@dataclass(frozen=True)
class Mapping(Pattern):
    """Keyed pattern with an optional rest target for unvisited keys."""

    entries: tuple[tuple[Hashable, Pattern], ...]
    rest: Pattern | None = None

    def __str__(self) -> str:
        parts = [f"{key!r}: {value}" for key, value in self.entries]
        if self.rest is not None:
            parts.append(f"...: {self.rest}")
        return "{" + ", ".join(parts) + "}"


PatternRepr = Union[Literal, LiteralDate, LiteralRegex, Variable, Rest, Sequence, Mapping]
