from bprog import Value
from bprog.errors import ExpectedList, ExpectedNumber
from bprog.evaluation.context import EvalContext
from bprog.evaluation.primitives import is_integer
from bprog.printer import to_source
from bprog.reader.parser import read_body
from bprog.reader.tokenizer import TokenStream
from bprog.types.stack import OperandStack


def foldl_form(stack: OperandStack, tokens: TokenStream, ctx: EvalContext) -> Value:
    """``list acc foldl BODY``: left fold, evaluating ``acc element BODY`` per element."""
    accumulator = stack.pop()
    items = stack.pop()
    body = read_body(tokens, "foldl")
    if not isinstance(items, list):
        raise ExpectedList("foldl requires a list")
    if not is_integer(accumulator):
        raise ExpectedNumber("foldl requires an integer accumulator")

    code = to_source(body)
    for item in items:
        accumulator = ctx.evaluate(f"{to_source(accumulator)} {to_source(item)} {code}")
    return accumulator
