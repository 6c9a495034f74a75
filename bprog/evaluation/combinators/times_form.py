from bprog import Value
from bprog.errors import ExpectedNumber, InvalidOperation
from bprog.evaluation.context import EvalContext, NO_RESULT
from bprog.evaluation.primitives import is_integer
from bprog.reader.parser import NOT_LITERAL, next_word, read_literal
from bprog.reader.tokenizer import TokenStream
from bprog.types.quotation import Quotation
from bprog.types.stack import OperandStack


def times_form(stack: OperandStack, tokens: TokenStream, ctx: EvalContext) -> Value:
    """``n times BODY``: leave n copies of the body's value.

    A braced body is evaluated once and its value replicated; a bare word is
    replicated as a quotation and runs later, during reduction.
    """
    count = stack.pop()
    word = next_word(tokens)
    if word is None:
        raise InvalidOperation("times requires a body")
    body = read_literal(word, tokens)
    if not is_integer(count):
        raise ExpectedNumber("times requires an integer count")
    if count <= 0:
        return NO_RESULT

    if body is NOT_LITERAL:
        value = Quotation(word)
    elif isinstance(body, Quotation):
        value = ctx.evaluate(body.text)
    else:
        value = body
    for _ in range(count - 1):
        stack.push(value)
    return value
