"""Output renderers."""

from frontmatter_validator.output.console import ConsoleReporter, Reporter, render_console_report
from frontmatter_validator.output.json_export import export_json_report
from frontmatter_validator.output.sarif_export import export_sarif_report

__all__ = [
    "ConsoleReporter",
    "Reporter",
    "export_json_report",
    "export_sarif_report",
    "render_console_report",
]
