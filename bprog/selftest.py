"""Batch self-test run offered by the command line front end.

Each case is a line of source and the text the interpreter must print for it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from bprog.interpreter import Interpreter

SELF_TEST_CASES: list[tuple[str, str]] = [
    ('3', '3'),
    ('121231324135634563456363567', '121231324135634563456363567'),
    ('1.0', '1.0'),
    ('0.0', '0.0'),
    ('-1', '-1'),
    ('-1.1', '-1.1'),
    ('False', 'False'),
    ('True', 'True'),
    ('[ [ ] [ ] ]', '[[ ],[ ]]'),
    ('[ False [ ] True [ 1 2 ] ]', '[False,[ ],True,[1,2]]'),
    ('" [ so { not if ] and } "', '" [ so { not if ] and } "'),
    ('1 1 +', '2'),
    ('10 20 *', '200'),
    ('20 2 div', '10'),
    ('20 2 /', '10.0'),
    ('1 1.0 +', '2.0'),
    ('10 20.0 *', '200.0'),
    ('20 2.0 div', '10'),
    ('20.0 2.0 div', '10'),
    ('False False &&', 'False'),
    ('False True ||', 'True'),
    ('False not', 'True'),
    ('True not', 'False'),
    ('20 10 <', 'False'),
    ('20 10 >', 'True'),
    ('20 10.0 >', 'True'),
    ('20.0 20.0 >', 'False'),
    ('10 10 ==', 'True'),
    ('10 10.0 ==', 'True'),
    ('True True ==', 'True'),
    ('True 40 40 == ==', 'True'),
    ('" abba " " abba " ==', 'True'),
    ('[ ] [ ] ==', 'True'),
    ('[ 1 2 ] [ 1 2 ] ==', 'True'),
    ('[ [ ] ] [ [ ] ] ==', 'True'),
    ('10 20 swap pop', '20'),
    ('10 dup dup + swap pop', '20'),
    ('10 20 swap dup + div', '1'),
    ('" hello " length', '5'),
    ('" hello world " length', '11'),
    ('[ 1 2 3 [ ] ] length', '4'),
    ('{ 10 20 + } length', '3'),
    ('" 12 " parseInteger', '12'),
    ('" 12.34 " parseFloat', '12.34'),
    ('" adam bob charlie " words', '[" adam "," bob "," charlie "]'),
    ('[ 1 2 3 ]', '[1,2,3]'),
    ('[ 1 " bob " ]', '[1," bob "]'),
    ('[ 1 2 ] empty', 'False'),
    ('[ ] empty', 'True'),
    ('[ 1 2 3 ] head', '1'),
    ('[ 1 2 3 ] length', '3'),
    ('[ 1 2 3 ] tail', '[2,3]'),
    ('1 [ ] cons', '[1]'),
    ('1 [ 2 3 ] cons', '[1,2,3]'),
    ('[ 1 2 ] [ ] append', '[1,2]'),
    ('[ 1 ] [ 2 3 ] append', '[1,2,3]'),
    ('[ 1 ] [ 2 3 ] cons', '[[1],2,3]'),
    ('True if { 20 } { }', '20'),
    ('True if { 20 10 + } { 3 }', '30'),
    ('10 5 5 == if { 10 + } { 100 + }', '20'),
    ('False if { } { 45 }', '45'),
    ('True if { False if { 50 } { 100 } } { 30 }', '100'),
    ('True if 20 { }', '20'),
    ('True if { 20 10 + } 3', '30'),
    ('10 10 5 5 == if + { 100 + }', '20'),
    ('False if { } 45', '45'),
    ('True if { False if 50 100 } 30', '100'),
    ('[ 1 2 3 ] map { 10 * }', '[10,20,30]'),
    ('[ 1 2 3 ] map { 1 + }', '[2,3,4]'),
    ('[ 1 2 3 4 ] map { dup 2 > if { 10 * } { 2 * } }', '[2,4,30,40]'),
    ('[ 1 2 3 4 ] each { 10 * } + + +', '100'),
    ('[ 1 2 3 4 ] 0 foldl { + }', '10'),
    ('[ 2 5 ] 20 foldl { div }', '2'),
    ('[ " 1 " " 2 " " 3 " ] each { parseInteger } [ ] cons cons cons', '[1,2,3]'),
    ('[ 1 2 3 4 ] 0 foldl +', '10'),
    ('[ 2 5 ] 20 foldl div', '2'),
    ('[ " 1 " " 2 " " 3 " ] each parseInteger [ ] 3 times cons', '[1,2,3]'),
    ('{ 20 10 + } exec', '30'),
    ('10 { 20 + } exec', '30'),
    ('10 20 { + } exec', '30'),
    ('{ { 10 20 + } exec } exec', '30'),
    ('1 times { 100 50 + }', '150'),
    # errors
    ('', 'Error: StackEmpty'),
    ('unknown', 'Error: InvalidOperation'),
    ('{ 1', 'Error: IncompleteQuotation'),
    ('[ 1 2', 'Error: IncompleteList'),
    ('" open', 'Error: IncompleteString'),
    ('[ ] head', 'Error: InvalidOperation'),
]


@dataclass
class SelfTestReport:
    passed: int = 0
    failures: list[tuple[str, str, str]] = field(default_factory=list)  # (source, expected, actual)

    @property
    def ok(self) -> bool:
        return not self.failures


def run_self_tests(
    interp: Optional[Interpreter] = None,
    out: Callable[[str], None] = print,
    cases: Optional[list[tuple[str, str]]] = None,
) -> SelfTestReport:
    interp = interp or Interpreter()
    report = SelfTestReport()
    out("Running tests...")
    for index, (source, expected) in enumerate(SELF_TEST_CASES if cases is None else cases, start=1):
        actual = interp.eval_to_text(source)
        if actual == expected:
            report.passed += 1
            out(f"Test {index} passed")
        else:
            report.failures.append((source, expected, actual))
            out(f"FAIL on test {index}\n- test: {source}\n- result: {actual}\n- expected: {expected}")
    out(f"{report.passed} successful tests!")
    return report
