from __future__ import annotations

from typing import Protocol

from rich.console import Console

from frontmatter_validator.models.reports import DocumentReport, DocumentStatus, ValidationReport

STATUS_LABELS = {
    DocumentStatus.VALID: "VALID",
    DocumentStatus.WARNING: "WARNING",
    DocumentStatus.INVALID: "ERROR",
}

STATUS_STYLES = {
    DocumentStatus.VALID: "green",
    DocumentStatus.WARNING: "yellow",
    DocumentStatus.INVALID: "red",
}


class Reporter(Protocol):
    def line(self, text: str = "") -> None: ...

    def emit(self, status: DocumentStatus, text: str) -> None: ...


class ConsoleReporter:
    def __init__(self, console: Console | None = None, *, no_color: bool = False) -> None:
        self.console = console or Console(no_color=no_color, highlight=False)

    def line(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def emit(self, status: DocumentStatus, text: str) -> None:
        self.console.print(text, style=STATUS_STYLES[status], markup=False, highlight=False, soft_wrap=True)


def render_document(document: DocumentReport, reporter: Reporter, *, verbose: bool = False) -> None:
    if document.status == DocumentStatus.VALID and not verbose:
        return

    reporter.emit(document.status, f"{STATUS_LABELS[document.status]}: {document.path}")
    for error in document.errors:
        reporter.emit(DocumentStatus.INVALID, f"  - {error}")
    for warning in document.warnings:
        reporter.emit(DocumentStatus.WARNING, f"  - {warning}")

    if document.suggested_template:
        reporter.line(f"  Suggested frontmatter for {document.path}:")
        for template_line in document.suggested_template.splitlines():
            reporter.line(f"    {template_line}")


def render_summary(report: ValidationReport, reporter: Reporter) -> None:
    reporter.line()
    reporter.line("Frontmatter validation summary")
    reporter.line(f"Root: {report.root}")
    reporter.line(f"Total files: {report.total}")
    reporter.emit(DocumentStatus.VALID, f"Valid: {report.valid}")
    reporter.emit(DocumentStatus.WARNING, f"With warnings: {report.with_warnings}")
    reporter.emit(DocumentStatus.INVALID, f"Invalid: {report.invalid}")
    reporter.line(f"Success rate: {report.success_rate:.1f}%")


def render_console_report(
    report: ValidationReport,
    reporter: Reporter | None = None,
    *,
    verbose: bool = False,
    no_color: bool = False,
) -> None:
    reporter = reporter or ConsoleReporter(no_color=no_color)

    for warning in report.diagnostics:
        reporter.emit(DocumentStatus.WARNING, f"Discovery: {warning}")

    for document in report.documents:
        render_document(document, reporter, verbose=verbose)

    render_summary(report, reporter)
