from __future__ import annotations

import json
import re
from pathlib import Path

from frontmatter_validator import __version__
from frontmatter_validator.models.reports import ValidationReport

RULE_PATTERNS: tuple[tuple[re.Pattern[str], str, str], ...] = (
    (re.compile(r"^No frontmatter found"), "missing-frontmatter", "Frontmatter block is missing"),
    (re.compile(r"^Unable to read file"), "unreadable-file", "Document could not be read"),
    (re.compile(r"^Missing required field"), "required-field", "Required field is missing"),
    (re.compile(r"^Forbidden field found"), "forbidden-field", "Forbidden field is present"),
    (re.compile(r"^Invalid area"), "invalid-area", "Area is not a known value"),
    (re.compile(r"^Area must be lowercase"), "area-format", "Area is not lowercase with hyphens"),
    (re.compile(r"^Invalid difficulty"), "invalid-difficulty", "Difficulty is not a known value"),
    (re.compile(r"^(Title|Description) is (quite short|too long)"), "field-length", "Field length out of range"),
    (re.compile(r"^Field '.+' (must be|is) an"), "list-field", "List field has the wrong shape"),
)
FALLBACK_RULE = ("frontmatter", "Frontmatter issue")


def _rule_for(message: str) -> tuple[str, str]:
    for pattern, rule_id, name in RULE_PATTERNS:
        if pattern.search(message):
            return rule_id, name
    return FALLBACK_RULE


def export_sarif_report(report: ValidationReport, output: str | None = None) -> str:
    results: list[dict[str, object]] = []
    rules: dict[str, dict[str, object]] = {}

    for document in report.documents:
        issues = [("error", message) for message in document.errors]
        issues.extend(("warning", message) for message in document.warnings)
        for level, message in issues:
            rule_suffix, rule_name = _rule_for(message)
            rule_id = f"frontmatter-validator/{rule_suffix}"
            rules[rule_id] = {
                "id": rule_id,
                "name": rule_name,
                "shortDescription": {"text": rule_name},
            }
            results.append(
                {
                    "ruleId": rule_id,
                    "level": level,
                    "message": {"text": message},
                    "locations": [
                        {
                            "physicalLocation": {
                                "artifactLocation": {"uri": Path(document.path).as_posix()},
                                "region": {"startLine": 1},
                            }
                        }
                    ],
                }
            )

    sarif = {
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "frontmatter-validator",
                        "version": __version__,
                        "rules": list(rules.values()),
                    }
                },
                "results": results,
            }
        ],
    }

    payload = json.dumps(sarif, indent=2)
    if output:
        Path(output).write_text(payload, encoding="utf-8")
    return payload
