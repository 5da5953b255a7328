"""Line-by-line driver and the human-readable run report."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from pliprep.classify import LineVerdict, classify_line
from pliprep.errors import Fault, format_fault
from pliprep.lexer import tokenize_line
from pliprep.tokens import Token


@dataclass(frozen=True, slots=True)
class LineReport:
    """Everything known about one processed line."""

    line_number: int
    verdict: LineVerdict
    tokens: tuple[Token, ...]
    fault: Fault | None
    text: str


@dataclass(slots=True)
class RunSummary:
    """Verdict counts for a whole run."""

    counts: Counter[LineVerdict] = field(default_factory=Counter)

    def add(self, report: LineReport) -> None:
        self.counts[report.verdict] += 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def malformed(self) -> int:
        return self.counts[LineVerdict.MALFORMED_DIRECTIVE_LINE]


_LINE_END = re.compile(r"\r\n|\r|\n")


def split_lines(source: str) -> list[str]:
    """Split source text on physical line ends only.

    Form feeds and the other characters ``str.splitlines`` treats as
    boundaries stay inside their line, so line numbers match the file.
    """
    lines = _LINE_END.split(source)
    if lines[-1] == "":
        lines.pop()
    return lines


def process_line(text: str, line_number: int) -> LineReport:
    """Tokenize and classify one line."""
    tokens, fault = tokenize_line(text, line_number)
    return LineReport(line_number, classify_line(tokens, fault), tokens, fault, text)


def process_lines(lines: Iterable[str], start: int = 1) -> Iterator[LineReport]:
    """Yield a report for each line, in order, numbering from ``start``."""
    for line_number, text in enumerate(lines, start):
        yield process_line(text, line_number)


def format_token(token: Token) -> str:
    return f"{token.category.name}({token.text!r})"


class ReportWriter:
    """Write a run report to an open text stream.

    Blank lines are counted in the summary but not listed.
    """

    def __init__(self, out: TextIO, filename: str = "input.pli") -> None:
        self._out = out
        self._filename = filename
        self.summary = RunSummary()

    def start(self, when: datetime | None = None) -> None:
        when = when or datetime.now()
        self._out.write(f"Processing started: {when.isoformat(sep=' ', timespec='seconds')}\n")
        self._out.write(f"Input: {self._filename}\n")

    def line(self, report: LineReport) -> None:
        self.summary.add(report)
        if report.verdict is LineVerdict.BLANK:
            return
        tokens = ", ".join(format_token(t) for t in report.tokens)
        self._out.write(f"Line {report.line_number} [{report.verdict.name}] Tokens: [{tokens}]\n")
        if report.fault is not None:
            snippet = format_fault(report.fault, report.text, self._filename)
            for snippet_line in split_lines(snippet):
                self._out.write(f"    {snippet_line}\n")

    def finish(self, when: datetime | None = None) -> None:
        when = when or datetime.now()
        self._out.write("Summary:\n")
        for verdict in LineVerdict:
            self._out.write(f"    {verdict.name}: {self.summary.counts[verdict]}\n")
        self._out.write(f"    TOTAL: {self.summary.total}\n")
        self._out.write(
            f"Processing completed: {when.isoformat(sep=' ', timespec='seconds')}\n"
        )


def write_report(
    reports: Iterable[LineReport],
    out: TextIO,
    filename: str = "input.pli",
) -> RunSummary:
    """Write a complete report for ``reports`` and return the summary."""
    writer = ReportWriter(out, filename)
    writer.start()
    for report in reports:
        writer.line(report)
    writer.finish()
    return writer.summary
