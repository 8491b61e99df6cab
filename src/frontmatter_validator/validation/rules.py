from __future__ import annotations

from dataclasses import dataclass, field

from frontmatter_validator.config import ValidationRules
from frontmatter_validator.models.frontmatter import FrontmatterRecord, ListValue

NO_FRONTMATTER_ERROR = "No frontmatter found"


@dataclass
class RuleResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _check_required(record: FrontmatterRecord, rules: ValidationRules, result: RuleResult) -> None:
    for name in rules.required_fields:
        if name not in record:
            result.errors.append(f"Missing required field: {name}")


def _check_forbidden(record: FrontmatterRecord, rules: ValidationRules, result: RuleResult) -> None:
    for name in rules.forbidden_fields:
        if name in record:
            result.errors.append(f"Forbidden field found: {name}")


def _check_area(record: FrontmatterRecord, rules: ValidationRules, result: RuleResult) -> None:
    area = record.scalar("area")
    if area is None:
        return
    # Both checks may fire for the same value.
    if area not in rules.valid_areas:
        result.errors.append(f"Invalid area '{area}'. Must be one of: {', '.join(rules.valid_areas)}")
    if area != area.lower() or " " in area:
        result.errors.append(f"Area must be lowercase with hyphens: '{area}'")


def _check_difficulty(record: FrontmatterRecord, rules: ValidationRules, result: RuleResult) -> None:
    difficulty = record.scalar("difficulty")
    if difficulty is None:
        return
    if difficulty not in rules.valid_difficulties:
        result.errors.append(
            f"Invalid difficulty '{difficulty}'. Must be one of: {', '.join(rules.valid_difficulties)}"
        )


def _check_length(
    record: FrontmatterRecord,
    name: str,
    *,
    min_length: int,
    max_length: int,
    result: RuleResult,
) -> None:
    value = record.scalar(name)
    if value is None:
        return
    label = name.capitalize()
    length = len(value)
    if length < min_length:
        result.warnings.append(
            f"{label} is quite short ({length} chars, recommended at least {min_length})"
        )
    if length > max_length:
        result.errors.append(f"{label} is too long ({length} chars, max {max_length})")


def _check_list_fields(record: FrontmatterRecord, rules: ValidationRules, result: RuleResult) -> None:
    for name in rules.list_fields:
        if name not in record:
            continue
        value = record[name]
        if not isinstance(value, ListValue):
            result.errors.append(f"Field '{name}' must be an array")
        elif not value.items:
            result.warnings.append(f"Field '{name}' is an empty array")


def validate_frontmatter(record: FrontmatterRecord, rules: ValidationRules) -> RuleResult:
    result = RuleResult()
    _check_required(record, rules, result)
    _check_forbidden(record, rules, result)
    _check_area(record, rules, result)
    _check_difficulty(record, rules, result)
    _check_length(
        record,
        "title",
        min_length=rules.title_min_length,
        max_length=rules.title_max_length,
        result=result,
    )
    _check_length(
        record,
        "description",
        min_length=rules.description_min_length,
        max_length=rules.description_max_length,
        result=result,
    )
    _check_list_fields(record, rules, result)
    return result
