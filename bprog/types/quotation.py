from __future__ import annotations


class Quotation:
    """Unevaluated program text.

    Nested quotations are kept as re-serialized ``{ ... }`` text inside
    ``text``; there is no parsed structure.
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Quotation) and self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self):
        return f"Quotation({self.text!r})"

    def __str__(self):
        return self.text
