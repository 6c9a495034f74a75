"""Evaluation of bprog lines: the stack machine, its primitives and combinators."""
