from __future__ import annotations

import json
from pathlib import Path

from frontmatter_validator.models.reports import DocumentReport, DocumentStatus, build_report
from frontmatter_validator.output.console import render_console_report
from frontmatter_validator.output.json_export import export_json_report
from frontmatter_validator.output.sarif_export import export_sarif_report


class RecordingReporter:
    def __init__(self) -> None:
        self.lines: list[tuple[DocumentStatus | None, str]] = []

    def line(self, text: str = "") -> None:
        self.lines.append((None, text))

    def emit(self, status: DocumentStatus, text: str) -> None:
        self.lines.append((status, text))


def _report():
    documents = [
        DocumentReport(path="areas/a.md", status=DocumentStatus.VALID),
        DocumentReport(
            path="areas/b.md",
            status=DocumentStatus.WARNING,
            warnings=["Title is quite short (5 chars, recommended at least 10)"],
        ),
        DocumentReport(
            path="areas/c.md",
            status=DocumentStatus.INVALID,
            errors=["Missing required field: tags", "Forbidden field found: author"],
            suggested_template='---\ntitle: "C"\n---',
        ),
    ]
    return build_report("areas", documents)


def test_build_report_counts() -> None:
    report = _report()

    assert (report.total, report.valid, report.with_warnings, report.invalid) == (3, 2, 1, 1)
    assert report.success_rate == 66.7
    assert report.exit_code == 1


def test_console_report_hides_valid_documents_unless_verbose() -> None:
    reporter = RecordingReporter()
    render_console_report(_report(), reporter)
    texts = [text for _, text in reporter.lines]

    assert "VALID: areas/a.md" not in texts
    assert (DocumentStatus.WARNING, "WARNING: areas/b.md") in reporter.lines
    assert (DocumentStatus.INVALID, "ERROR: areas/c.md") in reporter.lines
    assert (DocumentStatus.INVALID, "  - Forbidden field found: author") in reporter.lines
    assert "  Suggested frontmatter for areas/c.md:" in texts
    assert '    title: "C"' in texts
    assert texts[-1] == "Success rate: 66.7%"

    verbose = RecordingReporter()
    render_console_report(_report(), verbose, verbose=True)
    assert (DocumentStatus.VALID, "VALID: areas/a.md") in verbose.lines


def test_console_report_shows_discovery_diagnostics() -> None:
    reporter = RecordingReporter()
    render_console_report(build_report("missing", [], ["Path not found: missing"]), reporter)

    assert reporter.lines[0] == (DocumentStatus.WARNING, "Discovery: Path not found: missing")


def test_json_export_writes_file(tmp_path: Path) -> None:
    output = tmp_path / "report.json"
    payload = export_json_report(_report(), str(output))

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data == json.loads(payload)
    assert data["documents"][2]["status"] == "invalid"
    assert data["success_rate"] == 66.7


def test_sarif_export_maps_issues_to_rules() -> None:
    payload = json.loads(export_sarif_report(_report()))
    run = payload["runs"][0]

    assert payload["version"] == "2.1.0"
    rule_ids = [result["ruleId"] for result in run["results"]]
    assert rule_ids == [
        "frontmatter-validator/field-length",
        "frontmatter-validator/required-field",
        "frontmatter-validator/forbidden-field",
    ]
    levels = {result["ruleId"]: result["level"] for result in run["results"]}
    assert levels["frontmatter-validator/field-length"] == "warning"
    assert levels["frontmatter-validator/forbidden-field"] == "error"
    assert run["results"][0]["locations"][0]["physicalLocation"]["artifactLocation"]["uri"].endswith(".md")
