"""Primitive operators of the bprog runtime.

Each primitive takes the operand stack, pops what it needs and returns the
value to push (or NO_RESULT when it arranged the stack itself). Binary
operators pop the right operand first: for ``L R op`` the result is ``L op R``.

Wrong operand kinds raise ``Expected<Kind>`` when exactly one kind is
accepted, and InvalidOperation when several are. Popped operands are never
restored on failure.
"""
from __future__ import annotations

import math
import operator
import re
from typing import Callable

from bprog import Value
from bprog.errors import (
    ExpectedBool,
    ExpectedList,
    ExpectedNumber,
    ExpectedString,
    InvalidOperation,
)
from bprog.evaluation.context import NO_RESULT
from bprog.reader.parser import INT_RE
from bprog.reader.tokenizer import split_line
from bprog.types.quotation import Quotation
from bprog.types.stack import OperandStack

PARSE_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

Primitive = Callable[[OperandStack], Value]


def is_number(value: Value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_integer(value: Value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _pop_numbers(stack: OperandStack, word: str) -> tuple[Value, Value]:
    right = stack.pop()
    left = stack.pop()
    if not (is_number(left) and is_number(right)):
        raise ExpectedNumber(f"{word} requires two numbers")
    return left, right


def _pop_bools(stack: OperandStack, word: str) -> tuple[bool, bool]:
    right = stack.pop()
    left = stack.pop()
    if not (isinstance(left, bool) and isinstance(right, bool)):
        raise ExpectedBool(f"{word} requires two booleans")
    return left, right


def _pop_list(stack: OperandStack, word: str) -> list[Value]:
    value = stack.pop()
    if not isinstance(value, list):
        raise ExpectedList(f"{word} requires a list")
    return value


def _pop_string(stack: OperandStack, word: str) -> str:
    value = stack.pop()
    if not isinstance(value, str):
        raise ExpectedString(f"{word} requires a string")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def _arithmetic(word: str, op: Callable[[Value, Value], Value]) -> Primitive:
    def primitive(stack: OperandStack) -> Value:
        left, right = _pop_numbers(stack, word)
        if is_integer(left) and is_integer(right):
            return op(left, right)
        try:
            return op(float(left), float(right))
        except OverflowError as ex:
            raise InvalidOperation(f"{word}: integer too large for a float") from ex

    primitive.__name__ = f"arith_{op.__name__}"
    primitive.__doc__ = f"{word}: Integer if both operands are integers, otherwise Float."
    return primitive


add = _arithmetic("+", operator.add)
sub = _arithmetic("-", operator.sub)
mul = _arithmetic("*", operator.mul)


def true_div(stack: OperandStack) -> float:
    """/: always a Float; a zero divisor gives inf or nan as IEEE 754 does."""
    left, right = _pop_numbers(stack, "/")
    if right == 0:
        if left != left or left == 0:  # nan or zero dividend
            return math.nan
        negative = (left < 0) != (math.copysign(1.0, right) < 0)
        return -math.inf if negative else math.inf
    try:
        return float(left) / float(right)
    except OverflowError as ex:
        raise InvalidOperation("/: integer too large for a float") from ex


def int_div(stack: OperandStack) -> int:
    """div: operands truncated to integers, quotient truncated toward zero."""
    left, right = _pop_numbers(stack, "div")
    try:
        dividend, divisor = int(left), int(right)
    except (OverflowError, ValueError) as ex:
        raise InvalidOperation("div requires finite operands") from ex
    if divisor == 0:
        raise InvalidOperation("Division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


# -------------------------------
# Comparison
# -------------------------------
def less_than(stack: OperandStack) -> bool:
    left, right = _pop_numbers(stack, "<")
    return left < right


def greater_than(stack: OperandStack) -> bool:
    left, right = _pop_numbers(stack, ">")
    return left > right


def values_equal(a: Value, b: Value) -> bool:
    """Structural equality; Integer and Float compare numerically.

    Raises InvalidOperation when the two values are of incomparable kinds.
    """
    match (a, b):
        case (bool(), bool()):
            return a == b
        case (bool(), _) | (_, bool()):
            raise InvalidOperation("Cannot compare a boolean with a non-boolean")
        case (int() | float(), int() | float()):
            return a == b
        case (str(), str()):
            return a == b
        case (list(), list()):
            return len(a) == len(b) and all(_elements_equal(x, y) for x, y in zip(a, b))
        case (Quotation(), Quotation()):
            return a.text == b.text
    raise InvalidOperation(f"Cannot compare {type(a).__name__} with {type(b).__name__}")


def _elements_equal(a: Value, b: Value) -> bool:
    # inside a list, differing kinds are simply unequal
    try:
        return values_equal(a, b)
    except InvalidOperation:
        return False


def equals(stack: OperandStack) -> bool:
    right = stack.pop()
    left = stack.pop()
    return values_equal(left, right)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(stack: OperandStack) -> bool:
    left, right = _pop_bools(stack, "&&")
    return left and right


def logical_or(stack: OperandStack) -> bool:
    left, right = _pop_bools(stack, "||")
    return left or right


def logical_not(stack: OperandStack) -> bool:
    value = stack.pop()
    if not isinstance(value, bool):
        raise ExpectedBool("not requires a boolean")
    return not value


# -------------------------------
# Strings
# -------------------------------
def length(stack: OperandStack) -> int:
    """Element count of a list, character count of a string, token count of a quotation."""
    value = stack.pop()
    if isinstance(value, (list, str)):
        return len(value)
    if isinstance(value, Quotation):
        return len(split_line(value.text)) if value.text else 0
    raise InvalidOperation("length requires a list, string or quotation")


def words(stack: OperandStack) -> list[str]:
    text = _pop_string(stack, "words")
    return [word for word in text.split(" ") if word]


def parse_integer(stack: OperandStack) -> int:
    text = _pop_string(stack, "parseInteger")
    if not INT_RE.fullmatch(text):
        raise InvalidOperation(f"Not an integer: {text!r}")
    try:
        return int(text)
    except ValueError as ex:
        raise InvalidOperation(f"Not an integer: {text!r}") from ex


def parse_float(stack: OperandStack) -> float:
    text = _pop_string(stack, "parseFloat")
    if not PARSE_FLOAT_RE.fullmatch(text):
        raise InvalidOperation(f"Not a float: {text!r}")
    return float(text)


# -------------------------------
# List operations
# -------------------------------
def empty(stack: OperandStack) -> bool:
    return not _pop_list(stack, "empty")


def head(stack: OperandStack) -> Value:
    items = _pop_list(stack, "head")
    if not items:
        raise InvalidOperation("head of an empty list")
    return items[0]


def tail(stack: OperandStack) -> list[Value]:
    items = _pop_list(stack, "tail")
    if not items:
        raise InvalidOperation("tail of an empty list")
    return items[1:]


def cons(stack: OperandStack) -> list[Value]:
    """item list cons -> list with item in front."""
    items = stack.pop()
    item = stack.pop()
    if not isinstance(items, list):
        raise ExpectedList("cons requires a list on top of the stack")
    return [item] + items


def append(stack: OperandStack) -> list[Value]:
    right = stack.pop()
    left = stack.pop()
    if not (isinstance(left, list) and isinstance(right, list)):
        raise ExpectedList("append requires two lists")
    return left + right


# -------------------------------
# Stack manipulation
# -------------------------------
def dup(stack: OperandStack) -> Value:
    value = stack.pop()
    stack.push(value)
    return value


def swap(stack: OperandStack) -> Value:
    top = stack.pop()
    below = stack.pop()
    stack.push(top)
    return below


def pop(stack: OperandStack):
    stack.pop()
    return NO_RESULT


def exec_(stack: OperandStack) -> Value:
    """Return the top value unchanged; a lone quotation is then run by reduction."""
    return stack.pop()


PRIMITIVES: dict[str, Primitive] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": true_div,
    "div": int_div,
    "<": less_than,
    ">": greater_than,
    "==": equals,
    "&&": logical_and,
    "||": logical_or,
    "not": logical_not,
    "length": length,
    "words": words,
    "parseInteger": parse_integer,
    "parseFloat": parse_float,
    "empty": empty,
    "head": head,
    "tail": tail,
    "cons": cons,
    "append": append,
    "dup": dup,
    "swap": swap,
    "pop": pop,
    "exec": exec_,
}
