from bprog.types.quotation import Quotation
from bprog.types.stack import OperandStack

__all__ = ["Quotation", "OperandStack"]
