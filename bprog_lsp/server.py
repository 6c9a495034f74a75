from __future__ import annotations

"""
A minimal pygls-based Language Server for bprog.

Features:
- Text synchronization via the pygls workspace
- Diagnostics: failed lines (Error), operator errors reported on lines that
  still produced a value (Warning), unbalanced delimiters (Warning)
- Hover: stack effect of the word under the cursor
- Completion: every primitive and combinator

Every line is evaluated independently, so diagnostics are per line.
"""

from typing import List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)

from bprog import __version__
from bprog.evaluation.combinators import COMBINATORS
from bprog_lsp.analysis import BUILTIN_SIGNATURES, DocumentAnalysis, LineReport, analyze, word_at

SOURCE = "bprog-ls"


class BprogLanguageServer(LanguageServer):
    CMD_NAME = "bprog-ls"

    def __init__(self):
        super().__init__(name=self.CMD_NAME, version=__version__)


ls = BprogLanguageServer()


# --- Diagnostics ---
def _line_range(report: LineReport) -> Range:
    return Range(
        start=Position(line=report.line, character=0),
        end=Position(line=report.line, character=len(report.text)),
    )


def build_diagnostics(analysis: DocumentAnalysis) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    for report in analysis.lines:
        rng = _line_range(report)
        if report.error is not None:
            diags.append(
                Diagnostic(
                    range=rng,
                    message=f"Error: {report.error}",
                    severity=DiagnosticSeverity.Error,
                    source=SOURCE,
                )
            )
        else:
            for kind in report.reported:
                diags.append(
                    Diagnostic(
                        range=rng,
                        message=f"Error: {kind} (line still evaluates to {report.value})",
                        severity=DiagnosticSeverity.Warning,
                        source=SOURCE,
                    )
                )
        for problem in report.delimiter_problems:
            diags.append(
                Diagnostic(range=rng, message=problem, severity=DiagnosticSeverity.Warning, source=SOURCE)
            )
    return diags


def _publish_diagnostics(uri: str) -> None:
    document = ls.workspace.get_text_document(uri)
    ls.publish_diagnostics(uri, build_diagnostics(analyze(document.source)))


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    _publish_diagnostics(params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    _publish_diagnostics(params.text_document.uri)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    ls.publish_diagnostics(params.text_document.uri, [])


# --- Hover ---
def hover_text(source: str, position: Position) -> Optional[str]:
    lines = source.splitlines()
    if position.line >= len(lines):
        return None
    word = word_at(lines[position.line], position.character)
    if word is None:
        return None
    return BUILTIN_SIGNATURES.get(word)


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    document = ls.workspace.get_text_document(params.text_document.uri)
    contents = hover_text(document.source, params.position)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
def completion_items() -> List[CompletionItem]:
    return [
        CompletionItem(
            label=name,
            kind=CompletionItemKind.Keyword if name in COMBINATORS else CompletionItemKind.Function,
            detail=sig,
        )
        for name, sig in BUILTIN_SIGNATURES.items()
    ]


@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=[" "]))
def on_completion(params: CompletionParams) -> CompletionList:
    return CompletionList(is_incomplete=False, items=completion_items())


def main() -> None:
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
