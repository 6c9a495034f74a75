"""Text serialization of bprog values.

Two renderings are provided:

- ``format_value``: the canonical text shown to users (``[1,2,3]``, ``" hi "``).
- ``to_source``:    re-enterable program text (``[ 1 2 3 ]``) used when the
                    evaluator splices values back into source for combinators
                    and for flatten-and-continue reduction.

Scalars, strings and top-level quotations render identically in both.
"""

from __future__ import annotations

from bprog import Value
from bprog.types.quotation import Quotation


def format_float(value: float) -> str:
    """repr() of a float, forced to contain a decimal point."""
    text = repr(value)
    if "." in text or not text[-1].isdigit():
        return text  # "10.0", "inf", "nan"
    mantissa, sep, exponent = text.partition("e")
    return f"{mantissa}.0{sep}{exponent}"


def _format_scalar(value: Value) -> str | None:
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return f'" {value} "'
    return None


def format_value(value: Value) -> str:
    """Canonical user-visible text of a value."""
    scalar = _format_scalar(value)
    if scalar is not None:
        return scalar
    if isinstance(value, list):
        if not value:
            return "[ ]"
        return "[" + ",".join(format_value(item) for item in value) + "]"
    if isinstance(value, Quotation):
        return value.text
    raise TypeError(f"Not a bprog value: {value!r}")


def to_source(value: Value, nested: bool = False) -> str:
    """Program text that reads back to ``value``.

    A quotation at the top level is written unwrapped so splicing it into a
    program executes it; inside a list it keeps its braces.
    """
    scalar = _format_scalar(value)
    if scalar is not None:
        return scalar
    if isinstance(value, list):
        if not value:
            return "[ ]"
        return "[ " + " ".join(to_source(item, nested=True) for item in value) + " ]"
    if isinstance(value, Quotation):
        if not nested:
            return value.text
        return f"{{ {value.text} }}" if value.text else "{ }"
    raise TypeError(f"Not a bprog value: {value!r}")
