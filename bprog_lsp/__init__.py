"""bprog Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for bprog source files.
- A line analyser that evaluates each line independently and records results,
  errors and unbalanced delimiters.
- A simple TCP REPL server to evaluate lines via the Interpreter.
"""

__all__ = [
    "server",
    "analysis",
    "repl_server",
]
