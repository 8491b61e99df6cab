from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class DocumentStatus(StrEnum):
    VALID = "valid"
    WARNING = "warning"
    INVALID = "invalid"


class DocumentReport(BaseModel):
    path: str
    status: DocumentStatus
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    frontmatter: dict[str, str | list[str]] | None = None
    suggested_template: str | None = None


class ValidationReport(BaseModel):
    root: str
    documents: list[DocumentReport] = Field(default_factory=list)
    total: int = 0
    valid: int = 0
    invalid: int = 0
    with_warnings: int = 0
    success_rate: float = 0.0
    diagnostics: list[str] = Field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 0 if self.invalid == 0 else 1


def classify(errors: list[str], warnings: list[str]) -> DocumentStatus:
    if errors:
        return DocumentStatus.INVALID
    if warnings:
        return DocumentStatus.WARNING
    return DocumentStatus.VALID


def build_report(root: str, documents: list[DocumentReport], diagnostics: list[str] | None = None) -> ValidationReport:
    total = len(documents)
    invalid = sum(1 for item in documents if item.status == DocumentStatus.INVALID)
    with_warnings = sum(1 for item in documents if item.status == DocumentStatus.WARNING)
    valid = total - invalid
    success_rate = round(valid / total * 100, 1) if total else 0.0
    return ValidationReport(
        root=root,
        documents=documents,
        total=total,
        valid=valid,
        invalid=invalid,
        with_warnings=with_warnings,
        success_rate=success_rate,
        diagnostics=list(diagnostics or []),
    )
