"""Rewrite rules over item sequences, built on compiled matchers."""

from destructure.rewrite.calculator import bodmas_rules, evaluate, render, tokenize
from destructure.rewrite.engine import (
    Reducer,
    RewriteEngine,
    RewriteError,
    RewriteStep,
    RewriteTrace,
    Rule,
)

__all__ = [
    "Reducer",
    "RewriteEngine",
    "RewriteError",
    "RewriteStep",
    "RewriteTrace",
    "Rule",
    "bodmas_rules",
    "evaluate",
    "render",
    "tokenize",
]
