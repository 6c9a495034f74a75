# Core type aliases for bprog's data model.
# Values are plain Python types (int, float, bool, list, str) plus a single
# wrapper type, Quotation, for unevaluated program text. No tagged-union class
# is defined; the variant is the Python type.
#
# Naming guidance:
# - Value:     a runtime value living on the operand stack.
# - ErrorSink: side channel receiving operator errors that did not abort a line.

import logging
from typing import Any, Callable

__version__ = "0.3.0"

Value = Any
ErrorSink = Callable[[str, Exception], None]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from bprog.interpreter import Interpreter, EvalOutcome  # noqa: E402
from bprog.evaluation.evaluator import evaluate  # noqa: E402
from bprog.printer import format_value, to_source  # noqa: E402

__all__ = [
    "Value",
    "ErrorSink",
    "Interpreter",
    "EvalOutcome",
    "evaluate",
    "format_value",
    "to_source",
]
