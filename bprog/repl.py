"""Command line front end: batch self-test run or interactive read-eval-print loop."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from bprog import __version__
from bprog.config import get_log_level
from bprog.interpreter import Interpreter
from bprog.selftest import run_self_tests

BANNER = "Welcome to the bprog interpreter!"
MODE_PROMPT = "Testing or interpreting? (t/i)"
EXIT_WORDS = {"quit", "exit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bprog",
        description="Interpreter for the bprog postfix language.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-t", "--test", action="store_true", help="Run the built-in self-test table.")
    mode.add_argument("-i", "--interactive", action="store_true", help="Start the read-eval-print loop.")
    mode.add_argument("-e", "--eval", metavar="LINE", help="Evaluate a single line and print the result.")
    parser.add_argument("file", nargs="?", help="Evaluate every non-blank line of FILE.")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for the bprog logger (default: $BPROG_LOG_LEVEL or WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _printing_interpreter(out: Callable[[str], None]) -> Interpreter:
    return Interpreter(on_error=lambda word, error: out(f"Error: {error.kind}"))


def repl(read: Callable[[], str] = input, out: Callable[[str], None] = print) -> None:
    """Evaluate lines until EOF or an exit word; each line stands alone."""
    interp = _printing_interpreter(out)
    while True:
        try:
            line = read()
        except EOFError:
            return
        if line.strip() in EXIT_WORDS:
            return
        out(interp.eval_to_text(line))


def run_file(path: str, out: Callable[[str], None] = print) -> int:
    interp = _printing_interpreter(out)
    status = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            outcome = interp.run(line)
            out(outcome.render())
            if not outcome.ok:
                status = 1
    return status


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.getLevelName(args.log_level.upper()) if args.log_level else get_log_level()
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.eval is not None:
        outcome = _printing_interpreter(print).run(args.eval)
        print(outcome.render())
        return 0 if outcome.ok else 1
    if args.file:
        try:
            return run_file(args.file)
        except OSError as ex:
            print(f"Error: Could not read file '{args.file}': {ex}", file=sys.stderr)
            return 2
    if args.test:
        return 0 if run_self_tests().ok else 1
    if args.interactive:
        repl()
        return 0

    print(f"{BANNER}\n{MODE_PROMPT}")
    try:
        choice = input()
    except EOFError:
        return 0
    if "t" in choice:
        return 0 if run_self_tests().ok else 1
    repl()
    return 0


if __name__ == "__main__":
    sys.exit(main())
