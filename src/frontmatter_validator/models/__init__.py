"""Domain models."""

from frontmatter_validator.models.frontmatter import FieldValue, FrontmatterRecord, ListValue, Scalar
from frontmatter_validator.models.reports import DocumentReport, DocumentStatus, ValidationReport

__all__ = [
    "DocumentReport",
    "DocumentStatus",
    "FieldValue",
    "FrontmatterRecord",
    "ListValue",
    "Scalar",
    "ValidationReport",
]
