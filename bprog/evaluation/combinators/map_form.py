"""map and each.

Both splice every element's source text in front of the body's source text
and evaluate the result as a fresh program; ``each`` then spreads the mapped
values onto the enclosing stack.
"""

from __future__ import annotations

from bprog import Value
from bprog.errors import ExpectedList
from bprog.evaluation.context import EvalContext, NO_RESULT
from bprog.printer import to_source
from bprog.reader.parser import read_body
from bprog.reader.tokenizer import TokenStream
from bprog.types.quotation import Quotation
from bprog.types.stack import OperandStack


def map_values(items: list[Value], body: Value, ctx: EvalContext) -> list[Value]:
    code = to_source(body)
    mapped: list[Value] = []
    for item in items:
        item_source = to_source(item)
        result = ctx.evaluate(f"{item_source} {code}")
        # the body produced code to run against the element
        if isinstance(result, Quotation):
            result = ctx.evaluate(f"{item_source} {result.text}")
        mapped.append(result)
    return mapped


def _require_list(items: Value, word: str) -> None:
    if not isinstance(items, list):
        raise ExpectedList(f"{word} requires a list")


def map_form(stack: OperandStack, tokens: TokenStream, ctx: EvalContext) -> Value:
    items = stack.pop()
    body = read_body(tokens, "map")
    _require_list(items, "map")
    return map_values(items, body, ctx)


def each_form(stack: OperandStack, tokens: TokenStream, ctx: EvalContext) -> Value:
    """Map, then push every result but the last; the last is this word's result."""
    items = stack.pop()
    body = read_body(tokens, "each")
    _require_list(items, "each")
    mapped = map_values(items, body, ctx)
    if not mapped:
        return NO_RESULT
    for value in mapped[:-1]:
        stack.push(value)
    return mapped[-1]
