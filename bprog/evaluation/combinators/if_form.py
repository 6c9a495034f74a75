from bprog import Value
from bprog.errors import ExpectedBool
from bprog.evaluation.context import EvalContext
from bprog.reader.parser import read_body
from bprog.reader.tokenizer import TokenStream
from bprog.types.stack import OperandStack


def if_form(stack: OperandStack, tokens: TokenStream, ctx: EvalContext) -> Value:
    """``pred if THEN ELSE``: select a branch, leaving it unevaluated.

    Both branches are consumed from the token stream even when the predicate
    is not a boolean. A selected quotation runs through end-of-line reduction.
    """
    predicate = stack.pop()
    then_branch = read_body(tokens, "if")
    else_branch = read_body(tokens, "if")
    if not isinstance(predicate, bool):
        raise ExpectedBool("if requires a boolean predicate")
    return then_branch if predicate else else_branch
