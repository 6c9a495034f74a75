class BprogError(Exception):
    """ Base class for all bprog errors"""

    @property
    def kind(self) -> str:
        """Taxonomy name surfaced at the output boundary."""
        return type(self).__name__

    def __init__(self, message: str = ""):
        super().__init__(message or type(self).__name__)


class InvalidOperation(BprogError):
    """ Raised for unknown words, malformed text and operations with no meaning"""


class StructuralError(BprogError):
    """ Base for unterminated literals; these abort the whole line"""


class IncompleteList(StructuralError):
    """ Raised when a list literal is not closed by ']'"""


class IncompleteString(StructuralError):
    """ Raised when a string literal is not closed by '"'"""


class IncompleteQuotation(StructuralError):
    """ Raised when a quotation is not closed by '}'"""


class StackEmpty(BprogError):
    """ Raised when an operand is needed but the stack is empty"""


class ExpectedBool(BprogError):
    """ Raised when an operator needs a boolean operand"""


class ExpectedList(BprogError):
    """ Raised when an operator needs a list operand"""


class ExpectedNumber(BprogError):
    """ Raised when an operator needs an integer or float operand"""


class ExpectedString(BprogError):
    """ Raised when an operator needs a string operand"""


class RecursionDepthExceeded(BprogError):
    """ Raised when nested evaluation does not converge within the depth limit"""
