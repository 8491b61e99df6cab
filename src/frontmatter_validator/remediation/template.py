from __future__ import annotations

from pathlib import Path

from frontmatter_validator.models.frontmatter import FieldValue, ListValue, Scalar
from frontmatter_validator.validation.frontmatter import render_frontmatter

# Checked in order against the lowercase filename.
OBJECT_TYPE_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("table", "record"), "Table"),
    (("page", "list", "card"), "Page"),
    (("codeunit", "procedure", "function"), "Codeunit"),
    (("report",), "Report"),
    (("query",), "Query"),
    (("api", "webservice"), "Page"),
)
DEFAULT_OBJECT_TYPES = ("Codeunit",)
DEFAULT_DIFFICULTY = "intermediate"
ALWAYS_TAG = "best-practices"


def humanize_title(stem: str) -> str:
    words = stem.replace("_", " ").replace("-", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def guess_object_types(filename: str) -> tuple[str, ...]:
    lowered = filename.lower()
    found: list[str] = []
    for needles, object_type in OBJECT_TYPE_HINTS:
        if object_type in found:
            continue
        if any(needle in lowered for needle in needles):
            found.append(object_type)
    return tuple(found) or DEFAULT_OBJECT_TYPES


def guess_tags(stem: str) -> tuple[str, ...]:
    tokens = [token.lower() for token in stem.split("-") if len(token) > 2]
    return (*tokens, ALWAYS_TAG)


def suggest_frontmatter(path: Path) -> dict[str, FieldValue]:
    title = humanize_title(path.stem)
    return {
        "title": Scalar(title),
        "description": Scalar(f"Guidance and best practices for {title.lower()} in AL development"),
        "area": Scalar(path.parent.name),
        "difficulty": Scalar(DEFAULT_DIFFICULTY),
        "object_types": ListValue(guess_object_types(path.name)),
        "variable_types": ListValue(),
        "tags": ListValue(guess_tags(path.stem)),
    }


def generate_template(path: Path) -> str:
    """Render a suggested frontmatter block for ``path``.

    The suggestion is derived from the file and directory names only and is
    meant for a human to review; nothing is written to disk.
    """
    return render_frontmatter(suggest_frontmatter(path))
