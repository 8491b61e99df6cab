"""Advisory frontmatter suggestions."""

from frontmatter_validator.remediation.template import generate_template, suggest_frontmatter

__all__ = ["generate_template", "suggest_frontmatter"]
