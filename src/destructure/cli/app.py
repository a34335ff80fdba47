"""Typer CLI entrypoints."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from destructure.core.binding import Failure
from destructure.core.compiler import compile_pattern
from destructure.core.errors import PatternError
from destructure.core.sequence import SequenceStrategy
from destructure.logging_utils import configure_logging
from destructure.notation import binding_to_json, loads
from destructure.rewrite.calculator import evaluate, format_value, render
from destructure.rewrite.engine import RewriteError

app = typer.Typer(name="destructure", help="Structural pattern matching over JSON-like data", add_completion=False)


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


@app.command()
def calc(
    expression: Annotated[str, typer.Argument(help='Expression such as "5 + 4 × 3 ÷ 6".')],
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show the rule applied at each step.")] = False,
) -> None:
    """Reduce an arithmetic expression one rewrite at a time."""

    configure_logging(profile="cli")
    console = _console()
    logger.info("calc.start expression={}", expression)
    try:
        value, trace = evaluate(expression)
    except RewriteError as exc:
        logger.info("calc.error expression={} error={}", expression, exc)
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    console.print(escape(render(trace.initial)))
    for step in trace:
        suffix = f"  [dim]({step.rule})[/dim]" if verbose else ""
        console.print(f"{escape(render(step.state))}{suffix}")
    logger.info("calc.done value={} steps={}", format_value(value), len(trace))


@app.command("match")
def match_command(
    pattern: Annotated[str, typer.Argument(help='JSON pattern; {"$var": "name"} binds, "$rest" captures the rest.')],
    subject: Annotated[str, typer.Argument(help="JSON subject.")],
    strategy: Annotated[
        SequenceStrategy | None,
        typer.Option("--strategy", "-s", help="Sequence strategy (defaults to DESTRUCTURE_SEQUENCE_STRATEGY)."),
    ] = None,
) -> None:
    """Match a JSON subject against a JSON pattern and print the bindings."""

    configure_logging(profile="cli")
    console = _console()
    try:
        builder = loads(pattern)
        value = json.loads(subject)
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid JSON:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    try:
        matcher = compile_pattern(builder, strategy=strategy)
    except PatternError as exc:
        logger.info("match.error pattern={} error={}", pattern, exc)
        console.print(f"[red]Invalid pattern:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    result = matcher(value)
    if result is Failure:
        console.print("no match")
        raise typer.Exit(code=1)
    console.print(json.dumps(binding_to_json(result), ensure_ascii=False), markup=False, emoji=False)
