"""Line tokenizer.

A line is split on the single ASCII space. Runs of spaces produce empty
tokens; they are kept so the string and quotation readers see the raw
separators. The stream is stored reversed so popping from the end yields
tokens left to right.
"""

from __future__ import annotations

from typing import Optional


class TokenStream:
    __slots__ = ("tokens",)

    def __init__(self, tokens: list[str]):
        # physically reversed: tokens[-1] is the next token
        self.tokens: list[str] = tokens[::-1]

    def advance(self) -> Optional[str]:
        """Consume and return the next token, or None at end of stream."""
        if not self.tokens:
            return None
        return self.tokens.pop()

    def peek(self) -> Optional[str]:
        return self.tokens[-1] if self.tokens else None

    def remaining(self) -> list[str]:
        """Unconsumed tokens in reading order."""
        return self.tokens[::-1]

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def __repr__(self):
        return f"TokenStream({self.remaining()!r})"


def split_line(line: str) -> list[str]:
    return line.strip().split(" ")


def tokenize(line: str) -> TokenStream:
    return TokenStream(split_line(line))
