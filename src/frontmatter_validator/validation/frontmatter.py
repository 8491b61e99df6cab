from __future__ import annotations

from collections.abc import Mapping

from frontmatter_validator.models.frontmatter import FieldValue, FrontmatterRecord, ListValue, Scalar

DELIMITER = "---"


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def parse_value(raw: str) -> FieldValue:
    value = raw.strip()
    if value.startswith("[") and value.endswith("]"):
        items = (item.strip().strip('"') for item in value[1:-1].split(","))
        return ListValue(tuple(item for item in items if item))
    return Scalar(value.strip('"'))


def extract_frontmatter(text: str) -> FrontmatterRecord | None:
    """Parse the ``---`` delimited block at the top of ``text``.

    Returns ``None`` when the text does not open with a delimiter line or the
    block is never closed. Lines without a colon are skipped.
    """
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or not _is_delimiter(lines[0]):
        return None

    fields: dict[str, FieldValue] = {}
    for line in lines[1:]:
        if _is_delimiter(line):
            return FrontmatterRecord(fields)
        if not line.strip() or ":" not in line:
            continue
        key, _, raw_value = line.partition(":")
        key = key.strip()
        if not key:
            continue
        fields[key] = parse_value(raw_value)
    return None


def render_value(value: FieldValue) -> str:
    if isinstance(value, ListValue):
        return "[" + ", ".join(f'"{item}"' for item in value.items) + "]"
    return f'"{value.value}"'


def render_frontmatter(fields: Mapping[str, FieldValue]) -> str:
    lines = [DELIMITER]
    lines.extend(f"{key}: {render_value(value)}" for key, value in fields.items())
    lines.append(DELIMITER)
    return "\n".join(lines)
