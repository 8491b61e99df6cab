from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from frontmatter_validator import __version__
from frontmatter_validator.config import Settings, load_settings
from frontmatter_validator.output.console import ConsoleReporter, render_console_report
from frontmatter_validator.output.json_export import export_json_report
from frontmatter_validator.output.sarif_export import export_sarif_report
from frontmatter_validator.pipeline import run_validation
from frontmatter_validator.remediation.template import generate_template

app = typer.Typer(
    help=(
        "Validate the frontmatter of Markdown guideline files. "
        "Exits 1 when any document is invalid, for use as a CI gate."
    ),
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)

FORMATS = ("table", "json", "sarif")


@app.callback(invoke_without_command=True)
def callback(
    version: bool = typer.Option(False, "--version", help="Show version and exit.", is_eager=True)
) -> None:
    if version:
        console.print(__version__)
        raise typer.Exit()


@app.command()
def validate(
    path: str | None = typer.Option(
        None,
        help="Root directory (or single file) to scan (env: FRONTMATTER_VALIDATOR_ROOT, default: ./areas).",
    ),
    fix: bool = typer.Option(False, "--fix", help="Print suggested frontmatter for invalid documents."),
    verbose: bool = typer.Option(False, "--verbose", help="Show valid documents and enable verbose logs."),
    format: str = typer.Option("table", help="table|json|sarif"),
    output: str | None = typer.Option(None, help="Optional output file path for json/sarif payloads."),
    no_color: bool = typer.Option(False, help="Disable color output."),
) -> None:
    _configure_logging(verbose)

    if format not in FORMATS:
        console.print(
            f"Unknown format '{format}'. Choose one of: {', '.join(FORMATS)}.",
            markup=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=2)

    settings = _load_settings_or_exit(path)
    if not settings.root.exists():
        console.print(f"Path not found: {settings.root}", markup=False, soft_wrap=True)
        raise typer.Exit(code=2)

    report = run_validation(settings, fix=fix)
    logger.info(
        "validation finished: total=%s valid=%s invalid=%s warnings=%s",
        report.total,
        report.valid,
        report.invalid,
        report.with_warnings,
    )

    if format == "json":
        payload = export_json_report(report, output)
        if not output:
            console.print(payload, markup=False, highlight=False, soft_wrap=True)
    elif format == "sarif":
        payload = export_sarif_report(report, output)
        if not output:
            console.print(payload, markup=False, highlight=False, soft_wrap=True)
    else:
        render_console_report(report, ConsoleReporter(no_color=no_color), verbose=verbose)
        if output:
            Path(output).write_text(export_json_report(report), encoding="utf-8")

    if report.exit_code:
        raise typer.Exit(code=report.exit_code)


@app.command()
def template(
    file: Path = typer.Argument(..., help="Markdown file to suggest frontmatter for."),
) -> None:
    """Print a suggested frontmatter block for FILE without modifying it."""
    console.print(generate_template(file), markup=False, highlight=False, soft_wrap=True)


@app.command()
def rules(
    path: str | None = typer.Option(None, help="Root directory override, shown for reference."),
) -> None:
    """Show the active rule tables."""
    settings = _load_settings_or_exit(path)
    active = settings.rules
    lines = [
        f"root={settings.root}",
        f"required_fields={', '.join(active.required_fields)}",
        f"forbidden_fields={', '.join(active.forbidden_fields)}",
        f"valid_areas={', '.join(active.valid_areas)}",
        f"valid_difficulties={', '.join(active.valid_difficulties)}",
        f"list_fields={', '.join(active.list_fields)}",
        f"title_length={active.title_min_length}-{active.title_max_length}",
        f"description_length={active.description_min_length}-{active.description_max_length}",
        f"exclude_substrings={', '.join(settings.exclude_substrings)}",
        f"exclude_names={', '.join(settings.exclude_names)}",
    ]
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _load_settings_or_exit(path: str | None) -> Settings:
    try:
        return load_settings(root=path)
    except ValidationError as exc:
        console.print(f"Invalid configuration: {exc}", markup=False, soft_wrap=True)
        raise typer.Exit(code=2) from exc
