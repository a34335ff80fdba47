"""JSON notation for patterns.

Inside a JSON pattern document:

- ``{"$var": "name"}`` is the variable ``name``;
- the string ``"$rest"`` is the rest token;
- an object key ``"$rest"`` marks the rest target of that object.

Everything else is a literal.
"""

from __future__ import annotations

import json
from typing import Any, Callable

from destructure.core.compiler import BuilderContext

VAR_KEY = "$var"
REST_MARKER = "$rest"


def from_json(document: Any) -> Callable[[BuilderContext], Any]:
    """Return a pattern builder for a decoded JSON document."""

    def build(ctx: BuilderContext) -> Any:
        return _convert(document, ctx)

    return build


def loads(text: str) -> Callable[[BuilderContext], Any]:
    """Parse JSON text into a pattern builder."""
    return from_json(json.loads(text))


def _convert(node: Any, ctx: BuilderContext) -> Any:
    if isinstance(node, str) and node == REST_MARKER:
        return ctx.rest
    if isinstance(node, list):
        return [_convert(item, ctx) for item in node]
    if isinstance(node, dict):
        if set(node) == {VAR_KEY} and isinstance(node[VAR_KEY], str):
            return ctx.var(node[VAR_KEY])
        converted: dict[Any, Any] = {}
        for key, value in node.items():
            target = ctx.rest if key == REST_MARKER else key
            converted[target] = _convert(value, ctx)
        return converted
    return node


def binding_to_json(binding: Any) -> dict[str, Any]:
    """JSON-ready view of a binding; the rest capture is keyed ``"$rest"``."""
    return {REST_MARKER if not isinstance(key, str) else key: value for key, value in binding.items()}
