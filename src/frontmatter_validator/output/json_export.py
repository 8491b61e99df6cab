from __future__ import annotations

from pathlib import Path

from frontmatter_validator.models.reports import ValidationReport


def export_json_report(report: ValidationReport, output: str | None = None) -> str:
    payload = report.model_dump_json(indent=2)
    if output:
        Path(output).write_text(payload, encoding="utf-8")
    return payload
