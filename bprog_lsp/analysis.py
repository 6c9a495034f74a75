from __future__ import annotations

"""
Line analysis for bprog documents.

Every bprog line is an independent program, so a document is analysed line by
line: each non-blank line is evaluated on its own and its value, failure and
side-channel errors are recorded. Delimiter balance is checked separately so
an unterminated literal can be pointed at even when evaluation fails for
another reason.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from bprog.interpreter import Interpreter
from bprog.reader.parser import LIST_CLOSE, LIST_OPEN, QUOTE_CLOSE, QUOTE_OPEN, STRING_DELIM

# Stack effects shown on hover and completion.
BUILTIN_SIGNATURES = {
    "+": "+ ( a b -- a+b )",
    "-": "- ( a b -- a-b )",
    "*": "* ( a b -- a*b )",
    "/": "/ ( a b -- float )",
    "div": "div ( a b -- int )  truncating division",
    "<": "< ( a b -- bool )",
    ">": "> ( a b -- bool )",
    "==": "== ( a b -- bool )",
    "&&": "&& ( bool bool -- bool )",
    "||": "|| ( bool bool -- bool )",
    "not": "not ( bool -- bool )",
    "length": "length ( list|string|quotation -- int )",
    "words": "words ( string -- list )",
    "parseInteger": "parseInteger ( string -- int )",
    "parseFloat": "parseFloat ( string -- float )",
    "empty": "empty ( list -- bool )",
    "head": "head ( list -- x )",
    "tail": "tail ( list -- list )",
    "cons": "cons ( x list -- list )",
    "append": "append ( list list -- list )",
    "dup": "dup ( x -- x x )",
    "swap": "swap ( a b -- b a )",
    "pop": "pop ( x -- )",
    "exec": "exec ( x -- x )  a lone quotation is then run",
    "if": "if THEN ELSE ( bool -- branch )",
    "map": "map BODY ( list -- list )",
    "each": "each BODY ( list -- x1 .. xn )",
    "foldl": "foldl BODY ( list int -- acc )",
    "times": "times BODY ( int -- x1 .. xn )",
}


@dataclass
class LineReport:
    line: int
    text: str
    value: Optional[str] = None  # canonical text of the result
    error: Optional[str] = None  # error kind when the line failed
    reported: List[str] = field(default_factory=list)  # kinds reported while evaluating
    delimiter_problems: List[str] = field(default_factory=list)


@dataclass
class DocumentAnalysis:
    lines: List[LineReport] = field(default_factory=list)

    def failed(self) -> List[LineReport]:
        return [r for r in self.lines if r.error is not None]


def iter_words(line: str) -> Iterator[Tuple[str, int, int]]:
    """Yield (token, start, end) for every non-empty space-separated token."""
    pos = 0
    for token in line.split(" "):
        if token:
            yield token, pos, pos + len(token)
        pos += len(token) + 1


def delimiter_problems(line: str) -> List[str]:
    problems: List[str] = []
    depth = {LIST_OPEN: 0, QUOTE_OPEN: 0}
    closers = {LIST_CLOSE: LIST_OPEN, QUOTE_CLOSE: QUOTE_OPEN}
    in_string = False
    for token, _, _ in iter_words(line.strip()):
        if token == STRING_DELIM:
            in_string = not in_string
        elif in_string:
            continue
        elif token in depth:
            depth[token] += 1
        elif token in closers:
            opener = closers[token]
            if depth[opener] == 0:
                problems.append(f"Unmatched '{token}'")
            else:
                depth[opener] -= 1
    for opener, count in depth.items():
        if count > 0:
            problems.append(f"Unclosed '{opener}'")
    if in_string:
        problems.append("Unclosed '\"'")
    return problems


def analyze(text: str, interp: Optional[Interpreter] = None) -> DocumentAnalysis:
    # errors are collected on the report; keep them out of the log
    interp = interp or Interpreter(on_error=lambda word, error: None)
    analysis = DocumentAnalysis()
    for lineno, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        outcome = interp.run(line)
        analysis.lines.append(
            LineReport(
                line=lineno,
                text=line,
                value=outcome.render() if outcome.ok else None,
                error=outcome.error.kind if outcome.error is not None else None,
                reported=[err.kind for err in outcome.reported],
                delimiter_problems=delimiter_problems(line),
            )
        )
    return analysis


def word_at(line: str, character: int) -> Optional[str]:
    for token, start, end in iter_words(line):
        if start <= character <= end:
            return token
    return None
