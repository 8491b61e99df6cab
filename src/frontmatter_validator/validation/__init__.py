"""Frontmatter extraction and rule checks."""

from frontmatter_validator.validation.frontmatter import extract_frontmatter, render_frontmatter, render_value
from frontmatter_validator.validation.rules import NO_FRONTMATTER_ERROR, RuleResult, validate_frontmatter

__all__ = [
    "NO_FRONTMATTER_ERROR",
    "RuleResult",
    "extract_frontmatter",
    "render_frontmatter",
    "render_value",
    "validate_frontmatter",
]
