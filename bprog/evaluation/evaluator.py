"""Core evaluator for the bprog interpreter.

Implements the single evaluation loop: tokens are read left to right, literals
are pushed, words are dispatched to combinators or primitives. Operator errors
go to the context's error sink and the loop carries on. When the tokens run
out the stack is reduced to one value, re-evaluating serialized stack contents
as a fresh program when more than one value is left.
"""

from __future__ import annotations

import logging
from typing import Optional

from bprog import Value, ErrorSink
from bprog.config import get_max_depth
from bprog.errors import (
    BprogError,
    InvalidOperation,
    RecursionDepthExceeded,
    StackEmpty,
    StructuralError,
)
from bprog.evaluation.combinators import COMBINATORS
from bprog.evaluation.context import EvalContext, NO_RESULT
from bprog.evaluation.primitives import PRIMITIVES
from bprog.printer import to_source
from bprog.reader.parser import NOT_LITERAL, read_literal
from bprog.reader.tokenizer import TokenStream, tokenize
from bprog.types.quotation import Quotation
from bprog.types.stack import OperandStack

logger = logging.getLogger(__name__)


def log_error(word: str, error: Exception) -> None:
    """Default error sink: operator failures become warnings."""
    kind = getattr(error, "kind", type(error).__name__)
    logger.warning("Error: %s (at %r: %s)", kind, word, error)


def evaluate(
    line: str, on_error: Optional[ErrorSink] = None, max_depth: Optional[int] = None
) -> Value:
    """
    Evaluate one line as a top-level program and return its single value.

    Raises a BprogError subclass when the line fails to reduce.
    """
    ctx = EvalContext(
        evaluate_fn=evaluate0,
        on_error=on_error or log_error,
        max_depth=max_depth or get_max_depth(),
    )
    try:
        return evaluate0(line, ctx)
    except RecursionError as ex:
        raise RecursionDepthExceeded("Python recursion limit reached") from ex


def evaluate0(line: str, ctx: EvalContext) -> Value:
    """
    Core loop: evaluate ``line`` on a fresh operand stack at ``ctx.depth``.
    """
    if ctx.depth >= ctx.max_depth:
        raise RecursionDepthExceeded(f"Evaluation nested deeper than {ctx.max_depth}")

    tokens = tokenize(line)
    stack = OperandStack()
    failures: list[BprogError] = []

    while tokens:
        word = tokens.advance()
        if not word:
            continue  # blank word between consecutive spaces

        # Structural errors from a literal in operator position abort the line.
        value = read_literal(word, tokens)
        if value is not NOT_LITERAL:
            stack.push(value)
            continue

        try:
            result = dispatch(word, stack, tokens, ctx)
        except (RecursionDepthExceeded, StructuralError):
            # unterminated bodies abort the line like unterminated literals
            raise
        except BprogError as ex:
            failures.append(ex)
            ctx.report(word, ex)
            continue
        if result is not NO_RESULT:
            stack.push(result)

    return reduce_stack(line, stack, failures, ctx)


def dispatch(word: str, stack: OperandStack, tokens: TokenStream, ctx: EvalContext) -> Value:
    combinator = COMBINATORS.get(word)
    if combinator is not None:
        return combinator(stack, tokens, ctx)
    primitive = PRIMITIVES.get(word)
    if primitive is not None:
        return primitive(stack)
    raise InvalidOperation(f"Unknown word {word!r}")


def reduce_stack(
    line: str, stack: OperandStack, failures: list[BprogError], ctx: EvalContext
) -> Value:
    """End-of-line rule: collapse the stack to exactly one value."""
    if not stack:
        if failures:
            raise failures[-1]
        raise StackEmpty("Nothing left on the stack")

    if len(stack) == 1:
        value = stack.pop()
        if isinstance(value, Quotation):
            logger.debug("depth %d: executing quotation %r", ctx.depth, value.text)
            return ctx.evaluate(value.text)
        return value

    source = " ".join(to_source(value) for value in stack)
    if source == line.strip():
        raise RecursionDepthExceeded(f"Stack does not reduce: {source!r}")
    logger.debug("depth %d: flattening %d values into %r", ctx.depth, len(stack), source)
    return ctx.evaluate(source)
