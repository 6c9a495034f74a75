"""Per-call evaluation context.

Carries the evaluator entry point, the error side channel and the current
nesting depth into primitives and combinators. A nested evaluation gets a
copy with depth + 1; nothing else is shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from bprog import Value, ErrorSink


class _NoResult:
    def __repr__(self):
        return "NO_RESULT"


# Returned by operators that leave the stack as they arranged it.
NO_RESULT = _NoResult()


@dataclass(frozen=True)
class EvalContext:
    evaluate_fn: Callable[[str, "EvalContext"], Value]
    on_error: ErrorSink
    max_depth: int
    depth: int = 0

    def nested(self) -> EvalContext:
        return replace(self, depth=self.depth + 1)

    def evaluate(self, source: str) -> Value:
        """Evaluate ``source`` as a fresh top-level program one level deeper."""
        return self.evaluate_fn(source, self.nested())

    def report(self, word: str, error: Exception) -> None:
        self.on_error(word, error)
