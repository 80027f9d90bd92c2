from __future__ import annotations

"""
A minimal pygls-based Language Server for Ballgame.

Features:
- Text synchronization (full) and document store
- Diagnostics: parse errors at their column, evaluation errors per line
- Hover: rendered result of the line under the cursor, or a builtin signature
- Completion: primitives and special forms
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
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
    TextDocumentSyncKind,
)

from ballgame.interpreter import Interpreter
from ballgame_lsp.indexer import (
    BUILTIN_SIGNATURES,
    SPECIAL_FORM_SIGNATURES,
    LineReport,
    analyze_document,
    report_at,
)

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    reports: List[LineReport]


class BallgameLanguageServer(LanguageServer):
    CMD_NAME = "ballgame-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(
            self.CMD_NAME,
            self.VERSION,
            text_document_sync_kind=TextDocumentSyncKind.Full,
        )
        self.documents: Dict[str, DocumentState] = {}
        self.interpreter = Interpreter()

    def analyze(self, uri: str, text: str) -> DocumentState:
        state = DocumentState(text=text, reports=analyze_document(text, self.interpreter))
        self.documents[uri] = state
        return state


ls = BallgameLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    state = ls.analyze(uri, params.text_document.text or "")
    _publish_diagnostics(uri, state)


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    state = ls.analyze(uri, text)
    _publish_diagnostics(uri, state)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def to_diagnostic(report: LineReport) -> Diagnostic:
    if report.error_col is not None:
        start, end = report.error_col, report.error_col + 1
    else:
        start, end = report.start, report.end
    return Diagnostic(
        range=Range(
            start=Position(line=report.line, character=start),
            end=Position(line=report.line, character=end),
        ),
        message=report.error or "",
        severity=DiagnosticSeverity.Error if report.error_col is not None else DiagnosticSeverity.Warning,
        source=BallgameLanguageServer.CMD_NAME,
    )


def _publish_diagnostics(uri: str, state: DocumentState):
    diags = [to_diagnostic(r) for r in state.reports if not r.ok]
    logger.debug("%s: %d diagnostics", uri, len(diags))
    ls.publish_diagnostics(uri, diags)


# --- Hover ---
def hover_text(state: DocumentState, pos: Position) -> Optional[str]:
    word = _extract_word_at(state.text, pos)
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    if word in SPECIAL_FORM_SIGNATURES:
        return SPECIAL_FORM_SIGNATURES[word]
    report = report_at(state.reports, pos.line)
    if report is None:
        return None
    return f"=> {report.result}" if report.ok else report.error


@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    contents = hover_text(state, params.position)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
def completion_items() -> List[CompletionItem]:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    items.extend(
        CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig)
        for name, sig in SPECIAL_FORM_SIGNATURES.items()
    )
    return items


@ls.feature("textDocument/completion", CompletionOptions(trigger_characters=["(", "[", "{"]))
def on_completion(params: CompletionParams) -> CompletionList:
    return CompletionList(is_incomplete=False, items=completion_items())


# --- Helpers ---
_WORD_BREAKS = " \t\r\n()[]{}'\""


def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines()
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = end = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in _WORD_BREAKS:
        start -= 1
    while end < len(line) and line[end] not in _WORD_BREAKS:
        end += 1
    return line[start:end] or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
