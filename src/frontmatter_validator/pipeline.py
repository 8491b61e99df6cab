from __future__ import annotations

import logging
from pathlib import Path

from frontmatter_validator.config import Settings, ValidationRules
from frontmatter_validator.discovery.finder import discover_documents_with_diagnostics
from frontmatter_validator.models.reports import (
    DocumentReport,
    DocumentStatus,
    ValidationReport,
    build_report,
    classify,
)
from frontmatter_validator.remediation.template import generate_template
from frontmatter_validator.validation.frontmatter import extract_frontmatter
from frontmatter_validator.validation.rules import NO_FRONTMATTER_ERROR, validate_frontmatter

logger = logging.getLogger(__name__)


def validate_text(path: str, text: str, rules: ValidationRules) -> DocumentReport:
    record = extract_frontmatter(text)
    if record is None:
        return DocumentReport(path=path, status=DocumentStatus.INVALID, errors=[NO_FRONTMATTER_ERROR])

    result = validate_frontmatter(record, rules)
    return DocumentReport(
        path=path,
        status=classify(result.errors, result.warnings),
        errors=result.errors,
        warnings=result.warnings,
        frontmatter=record.to_plain(),
    )


def validate_document(path: Path, rules: ValidationRules, *, fix: bool = False) -> DocumentReport:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        report = DocumentReport(
            path=str(path),
            status=DocumentStatus.INVALID,
            errors=[f"Unable to read file: {exc}"],
        )
    else:
        report = validate_text(str(path), text, rules)

    logger.info(
        "Validated %s: status=%s errors=%s warnings=%s",
        path,
        report.status.value,
        len(report.errors),
        len(report.warnings),
    )

    if fix and report.status == DocumentStatus.INVALID:
        report.suggested_template = generate_template(path)
    return report


def run_validation(settings: Settings, *, root: Path | None = None, fix: bool = False) -> ValidationReport:
    """Validate every candidate document under ``root`` (default ``settings.root``).

    Documents are processed one at a time in path order. Problems with a single
    document are recorded on its report and never stop the run.
    """
    scan_root = root if root is not None else settings.root
    documents, diagnostics = discover_documents_with_diagnostics(
        scan_root,
        exclude_substrings=settings.exclude_substrings,
        exclude_names=settings.exclude_names,
    )
    logger.info("validation config: root=%s documents=%s fix=%s", scan_root, len(documents), fix)

    reports = [validate_document(path, settings.rules, fix=fix) for path in documents]
    return build_report(str(scan_root), reports, diagnostics)
