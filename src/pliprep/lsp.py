"""Minimal LSP server for pliprep: per-line diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from pliprep import __version__
from pliprep.errors import UnrecognizedDirective, UnterminatedStringLiteral
from pliprep.report import LineReport, process_lines, split_lines

server = LanguageServer(
    "pliprep-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(report: LineReport) -> Diagnostic | None:
    """Build the diagnostic for a faulted line, or None for a clean one."""
    fault = report.fault
    line = report.line_number - 1
    match fault:
        case UnterminatedStringLiteral(started_at_column=col):
            start = col - 1
            end = max(start + 1, len(report.text))
        case UnrecognizedDirective(name=name, column=col):
            start = col - 1
            end = start + len(name)
        case None:
            return None

    return Diagnostic(
        range=Range(
            start=Position(line=line, character=start),
            end=Position(line=line, character=end),
        ),
        message=fault.message,
        severity=DiagnosticSeverity.Error,
        source="pliprep",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize every line of the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []
    for report in process_lines(split_lines(doc.source)):
        diagnostic = _diagnostic(report)
        if diagnostic is not None:
            diagnostics.append(diagnostic)

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
