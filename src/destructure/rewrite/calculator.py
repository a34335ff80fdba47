"""Arithmetic reducer built from rewrite rules.

Tokens are plain dicts, ``{"type": "number", "value": 5}`` or
``{"type": "operation", "value": "+"}``, and every rule is an ordinary
compiled pattern over a three-token window.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from destructure.core.binding import Binding
from destructure.core.compiler import BuilderContext, compile_pattern
from destructure.core.sequence import SequenceStrategy
from destructure.rewrite.engine import RewriteEngine, RewriteError, RewriteTrace, Rule

NUMBER = "number"
OPERATION = "operation"

ALIASES = {"/": "÷", "*": "×", "−": "-"}

ADDITIVE: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
}


def token(kind: str, value: Any) -> dict[str, Any]:
    return {"type": kind, "value": value}


def tokenize(text: str) -> list[dict[str, Any]]:
    """Split on whitespace; numeric words become numbers, others operations."""
    tokens = []
    for word in text.split():
        number = _parse_number(word)
        if number is None:
            tokens.append(token(OPERATION, ALIASES.get(word, word)))
        else:
            tokens.append(token(NUMBER, number))
    if not tokens:
        raise RewriteError("Nothing to evaluate", [])
    return tokens


def _parse_number(word: str) -> int | float | None:
    if not any(char.isdigit() for char in word):
        return None
    try:
        return int(word)
    except ValueError:
        pass
    try:
        return float(word)
    except ValueError:
        return None


def _binary(symbol: str | None) -> Callable[[BuilderContext], list[Any]]:
    def build(ctx: BuilderContext) -> list[Any]:
        op = symbol if symbol is not None else ctx.var("op")
        return [
            token(NUMBER, ctx.var("first")),
            token(OPERATION, op),
            token(NUMBER, ctx.var("second")),
        ]

    return build


def _divide(binding: Binding) -> dict[str, Any]:
    return token(NUMBER, binding["first"] / binding["second"])


def _multiply(binding: Binding) -> dict[str, Any]:
    return token(NUMBER, binding["first"] * binding["second"])


def _additive(binding: Binding) -> dict[str, Any]:
    op = binding["op"]
    if op not in ADDITIVE:
        raise RewriteError(f"Unsupported operation: {op!r}")
    return token(NUMBER, ADDITIVE[op](binding["first"], binding["second"]))


def bodmas_rules() -> list[Rule]:
    """Division, then multiplication, then addition and subtraction.

    Addition and subtraction share one rule so they apply left to right.
    """
    strict = SequenceStrategy.STRICT
    return [
        Rule("divide", compile_pattern(_binary("÷"), strategy=strict), _divide),
        Rule("multiply", compile_pattern(_binary("×"), strategy=strict), _multiply),
        Rule("additive", compile_pattern(_binary(None), strategy=strict), _additive),
    ]


def evaluate(text: str, *, engine: RewriteEngine | None = None) -> tuple[int | float, RewriteTrace]:
    """Reduce an expression such as ``"5 + 4 × 3 ÷ 6"`` to a number.

    Raises:
        RewriteError: If the text cannot be reduced to a single number.
    """
    engine = engine or RewriteEngine(bodmas_rules())
    items, trace = engine.run(tokenize(text))
    if len(items) != 1 or items[0]["type"] != NUMBER:
        raise RewriteError(f"Cannot reduce expression: {render(items)}", items)
    return items[0]["value"], trace


def format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render(items: list[dict[str, Any]]) -> str:
    return "= " + " ".join(format_value(item["value"]) for item in items)
