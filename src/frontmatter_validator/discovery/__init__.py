"""Markdown document discovery."""

from frontmatter_validator.discovery.finder import discover_documents, discover_documents_with_diagnostics

__all__ = ["discover_documents", "discover_documents_with_diagnostics"]
