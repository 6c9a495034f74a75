from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from bprog import Value, ErrorSink
from bprog.errors import BprogError
from bprog.evaluation.evaluator import evaluate
from bprog.printer import format_value

logger = logging.getLogger(__name__)


@dataclass
class EvalOutcome:
    """Result of evaluating one line, with the errors reported along the way."""

    line: str
    value: Value = None
    error: Optional[BprogError] = None
    reported: list[BprogError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.error is not None:
            return f"Error: {self.error.kind}"
        return format_value(self.value)


class Interpreter:
    """
    Evaluates bprog lines one at a time.

    No state is kept between calls: every line gets a fresh operand stack.
    ``on_error`` receives operator errors that did not abort the line.
    """

    def __init__(self, on_error: ErrorSink | None = None, max_depth: int | None = None):
        self.on_error = on_error
        self.max_depth = max_depth

    def eval(self, line: str) -> Value:
        return evaluate(line, on_error=self.on_error, max_depth=self.max_depth)

    def run(self, line: str) -> EvalOutcome:
        outcome = EvalOutcome(line=line)

        def collect(word: str, error: Exception) -> None:
            logger.debug("reported %s at %r", type(error).__name__, word)
            outcome.reported.append(error)
            if self.on_error is not None:
                self.on_error(word, error)

        try:
            outcome.value = evaluate(line, on_error=collect, max_depth=self.max_depth)
        except BprogError as ex:
            outcome.error = ex
        return outcome

    def eval_to_text(self, line: str) -> str:
        """Canonical text of the line's value, or ``Error: <Kind>``."""
        return self.run(line).render()
