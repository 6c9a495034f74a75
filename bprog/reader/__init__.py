from bprog.reader.tokenizer import TokenStream, tokenize
from bprog.reader.parser import NOT_LITERAL, next_word, read_literal, read_body

__all__ = ["TokenStream", "tokenize", "NOT_LITERAL", "next_word", "read_literal", "read_body"]
