"""Window-based rewrite rules driven by compiled matchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

from loguru import logger

from destructure.core.binding import Binding, Failure
from destructure.core.compiler import Matcher
from destructure.core.errors import DestructureError
from destructure.core.patterns import Rest, Sequence

Reducer = Callable[[Binding], Any]


class RewriteError(DestructureError):
    """A rewrite run could not reduce its input."""

    def __init__(self, message: str, items: list[Any] | None = None):
        super().__init__(message)
        self.items = items


@dataclass(frozen=True)
class Rule:
    """Replace each matching window of ``width`` items with ``reducer(binding)``.

    ``width`` defaults to the length of the matcher's sequence pattern, which
    must then contain no rest.
    """

    name: str
    matcher: Matcher
    reducer: Reducer
    width: int | None = None

    @property
    def window(self) -> int:
        if self.width is not None:
            return self.width
        pattern = self.matcher.pattern
        if isinstance(pattern, Sequence) and not any(isinstance(item, Rest) for item in pattern.items):
            return len(pattern.items)
        raise RewriteError(f"Rule {self.name!r} needs an explicit width")


@dataclass(frozen=True)
class RewriteStep:
    """A single applied rewrite."""

    rule: str
    index: int
    before: list[Any]
    after: Any
    state: list[Any]

    def __str__(self) -> str:
        return f"{self.rule}@{self.index}: {self.before} -> {self.after}"


@dataclass
class RewriteTrace:
    """Every rewrite applied during a run, in order."""

    initial: list[Any] = field(default_factory=list)
    final: list[Any] = field(default_factory=list)
    steps: list[RewriteStep] = field(default_factory=list)

    def states(self) -> Iterator[list[Any]]:
        """The initial items followed by the items after each step."""
        yield self.initial
        for step in self.steps:
            yield step.state

    def rules_applied(self) -> list[str]:
        return [step.rule for step in self.steps]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[RewriteStep]:
        return iter(self.steps)

    def __bool__(self) -> bool:
        return bool(self.steps)


class RewriteEngine:
    """Applies rules in priority order over fixed-size windows.

    One sweep runs every rule once, left to right across the items. When a
    window matches, it is replaced by the reducer's single item and the rule
    is retried at the same position, so chains such as ``2 × 3 × 4`` reduce
    in one sweep.
    """

    def __init__(self, rules: list[Rule], *, max_passes: int | None = None) -> None:
        if max_passes is None:
            from destructure.config.settings import load_settings

            max_passes = load_settings().rewrite_max_passes
        self.rules = list(rules)
        self.max_passes = max_passes
        for rule in self.rules:
            if rule.window < 1:
                raise RewriteError(f"Rule {rule.name!r} has an empty window")

    def step(self, items: list[Any]) -> tuple[list[Any], list[RewriteStep]]:
        """Run one sweep of every rule; return the new items and applied steps."""
        current = list(items)
        applied: list[RewriteStep] = []
        for rule in self.rules:
            width = rule.window
            index = 0
            while index < len(current):
                window = current[index : index + width]
                binding = rule.matcher(window)
                if binding is Failure:
                    index += 1
                    continue

                replacement = self._reduce(rule, binding, current)
                current = [*current[:index], replacement, *current[index + width :]]
                applied.append(RewriteStep(rule.name, index, window, replacement, list(current)))
                logger.debug("rewrite.apply rule={} index={} size={}", rule.name, index, len(current))
                if width == 1:
                    index += 1
        return current, applied

    def run(self, items: list[Any]) -> tuple[list[Any], RewriteTrace]:
        """Sweep until no rule applies or ``max_passes`` sweeps have run."""
        trace = RewriteTrace(initial=list(items))
        current = list(items)
        for sweep in range(self.max_passes):
            current, applied = self.step(current)
            if not applied:
                break
            trace.steps.extend(applied)
            logger.debug("rewrite.sweep number={} applied={}", sweep + 1, len(applied))
        else:
            logger.warning("rewrite.max_passes reached passes={}", self.max_passes)
        trace.final = current
        return current, trace

    @staticmethod
    def _reduce(rule: Rule, binding: Binding, items: list[Any]) -> Any:
        try:
            return rule.reducer(binding)
        except RewriteError:
            raise
        except (ArithmeticError, LookupError, TypeError, ValueError) as exc:
            raise RewriteError(f"Rule {rule.name!r} failed: {exc}", items) from exc
