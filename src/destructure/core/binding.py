"""Binding sets and the match failure sentinel."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Hashable, Union

from destructure.core.patterns import REST, Token
from destructure.core.scalars import strict_equal


class FailureType:
    """Type of the ``Failure`` sentinel. Only one instance ever exists."""

    _instance: FailureType | None = None

    def __new__(cls) -> FailureType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Failure"

    def __reduce__(self) -> str:
        return "Failure"


Failure = FailureType()


class Binding(Mapping):
    """Immutable mapping from variable tokens to matched values.

    Lookup accepts the token itself or the variable's name; the rest token is
    looked up as ``REST``. Iteration yields names (and ``REST`` for rest
    captures). A binding is truthy even when empty, so ``if matcher(x):``
    distinguishes success from ``Failure``.
    """

    __slots__ = ("_values", "_names")

    def __init__(self, values: dict[Token, Any] | None = None, names: Mapping[Token, str] | None = None) -> None:
        self._values: dict[Token, Any] = dict(values) if values else {}
        self._names: Mapping[Token, str] = names or {}

    @staticmethod
    def empty() -> Binding:
        """Create an empty binding."""
        return Binding()

    @staticmethod
    def singleton(token: Token, value: Any) -> Binding:
        """Create a binding with a single entry."""
        return Binding({token: value})

    def merge(self, other: Binding) -> Binding | FailureType:
        """Combine two bindings; repeated tokens must agree.

        Returns ``Failure`` when ``other`` binds a token already bound here to
        a value that is not strictly equal. The anonymous ``REST`` token is a
        wildcard and is exempt: its latest capture replaces the earlier one.
        """
        if not other._values:
            return self
        merged = dict(self._values)
        for token, value in other._values.items():
            if token is not REST and token in merged and not strict_equal(merged[token], value):
                return Failure
            merged[token] = value
        return Binding(merged, self._names)

    def named(self, names: Mapping[Token, str]) -> Binding:
        """The same captures, reported under the names in ``names``."""
        return Binding(self._values, names)

    def by_name(self) -> dict[Hashable, Any]:
        """Plain dict keyed by variable name (``REST`` for rest captures)."""
        return {self._public_key(token): value for token, value in self._values.items()}

    def _public_key(self, token: Token) -> Hashable:
        if token is REST:
            return REST
        return self._names.get(token, token.name)

    def _resolve(self, key: Hashable) -> Token:
        if isinstance(key, Token):
            if key in self._values:
                return key
            raise KeyError(key)
        if isinstance(key, str):
            for token in self._values:
                if token is not REST and self._public_key(token) == key:
                    return token
        raise KeyError(key)

    def __getitem__(self, key: Hashable) -> Any:
        return self._values[self._resolve(key)]

    def __iter__(self) -> Iterator[Hashable]:
        return (self._public_key(token) for token in self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        items = ", ".join(f"{self._public_key(token)!r}: {value!r}" for token, value in self._values.items())
        return f"Binding({{{items}}})"


MatchResult = Union[Binding, FailureType]
