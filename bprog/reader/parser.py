"""
  Literal classification and structural readers.

- Lazy: readers are only invoked when the evaluator meets a delimiter token,
  and they consume exactly the tokens of the literal they read.
- Emits Python primitives:

    - integers -> int (arbitrary precision)
    - floats -> float (token must contain a '.', or be inf, -inf or nan)
    - True / False -> bool
    - [ ... ] -> list
    - " ... " -> str (single-space joined, trimmed)
    - { ... } -> Quotation (raw text; nested blocks re-wrapped in braces)

Anything else is not a literal and is returned as NOT_LITERAL so the caller
can dispatch it as a word.
"""

from __future__ import annotations

import re
from typing import Optional

from bprog import Value
from bprog.errors import (
    IncompleteList,
    IncompleteQuotation,
    IncompleteString,
    InvalidOperation,
)
from bprog.reader.tokenizer import TokenStream
from bprog.types.quotation import Quotation


FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
INT_RE = re.compile(r"[+-]?[0-9]+")

BOOLEANS: dict[str, bool] = {
    "True": True,
    "False": False,
}

# spellings format_float emits for non-finite values
NON_FINITE: dict[str, float] = {
    "inf": float("inf"),
    "-inf": float("-inf"),
    "nan": float("nan"),
}

LIST_OPEN, LIST_CLOSE = "[", "]"
QUOTE_OPEN, QUOTE_CLOSE = "{", "}"
STRING_DELIM = '"'


class _NotLiteral:
    def __repr__(self):
        return "NOT_LITERAL"


NOT_LITERAL = _NotLiteral()


def read_literal(token: str, stream: TokenStream) -> Value:
    """Classify ``token``; delimiter tokens pull the rest of the literal from ``stream``."""
    if token == LIST_OPEN:
        return read_list(stream)
    if token == QUOTE_OPEN:
        return read_quotation(stream)
    if FLOAT_RE.fullmatch(token):
        return float(token)
    if INT_RE.fullmatch(token):
        return int(token)
    if token in BOOLEANS:
        return BOOLEANS[token]
    if token in NON_FINITE:
        return NON_FINITE[token]
    if token == STRING_DELIM:
        return read_string(stream)
    return NOT_LITERAL


def read_list(stream: TokenStream) -> list[Value]:
    items: list[Value] = []
    while True:
        token = stream.advance()
        if token is None:
            raise IncompleteList("Unexpected end of line while reading list")
        if token == LIST_CLOSE:
            return items
        if not token:
            continue
        value = read_literal(token, stream)
        if value is NOT_LITERAL:
            raise IncompleteList(f"Unexpected word {token!r} inside list")
        items.append(value)


def read_string(stream: TokenStream) -> str:
    words: list[str] = []
    while True:
        token = stream.advance()
        if token is None:
            raise IncompleteString("Unexpected end of line while reading string")
        if token == STRING_DELIM:
            return " ".join(words)
        if token:
            words.append(token)


def read_quotation(stream: TokenStream) -> Quotation:
    parts: list[str] = []
    while True:
        token = stream.advance()
        if token is None:
            raise IncompleteQuotation("Unexpected end of line while reading quotation")
        if token == QUOTE_CLOSE:
            return Quotation(" ".join(parts).strip())
        if token == QUOTE_OPEN:
            inner = read_quotation(stream)
            parts.append(f"{{ {inner.text} }}" if inner.text else "{ }")
        else:
            parts.append(token)


def next_word(stream: TokenStream) -> Optional[str]:
    """Next non-blank token, or None at end of stream."""
    token = stream.advance()
    while token == "":
        token = stream.advance()
    return token


def read_body(stream: TokenStream, word: str) -> Value:
    """Read the body argument of a combinator from the token stream.

    A literal body is returned as read; a bare word becomes a Quotation of
    that word.
    """
    token = next_word(stream)
    if token is None:
        raise InvalidOperation(f"{word} requires a body")
    value = read_literal(token, stream)
    if value is NOT_LITERAL:
        return Quotation(token)
    return value
