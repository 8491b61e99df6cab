from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from frontmatter_validator.discovery.finder import DEFAULT_EXCLUDE_NAMES, DEFAULT_EXCLUDE_SUBSTRINGS

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "frontmatter-validator.toml"
ROOT_ENV_VAR = "FRONTMATTER_VALIDATOR_ROOT"


class ValidationRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    required_fields: tuple[str, ...] = (
        "title",
        "description",
        "area",
        "difficulty",
        "object_types",
        "variable_types",
        "tags",
    )
    # object_type / variable_type guard against the singular spelling of the list fields.
    forbidden_fields: tuple[str, ...] = (
        "author",
        "ms.date",
        "ms.topic",
        "ms.service",
        "ai_guidance",
        "copilot_behavior",
        "devops_integration",
        "last_modified",
        "skill_level",
        "object_type",
        "variable_type",
        "ai_tags",
    )
    valid_areas: tuple[str, ...] = (
        "appsource-compliance",
        "code-creation",
        "code-formatting",
        "code-review",
        "copilot-prompting",
        "core-development",
        "error-handling",
        "integration",
        "naming-conventions",
        "performance-optimization",
        "project-workflow-integration",
        "security",
        "testing",
        "upgrade-installation",
        "workflow-approvals",
    )
    valid_difficulties: tuple[str, ...] = ("beginner", "intermediate", "advanced", "expert")
    list_fields: tuple[str, ...] = ("object_types", "variable_types", "tags")
    title_min_length: int = Field(default=10, ge=0)
    title_max_length: int = Field(default=100, ge=1)
    description_min_length: int = Field(default=20, ge=0)
    description_max_length: int = Field(default=200, ge=1)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: Path = Path("areas")
    exclude_substrings: tuple[str, ...] = DEFAULT_EXCLUDE_SUBSTRINGS
    exclude_names: tuple[str, ...] = DEFAULT_EXCLUDE_NAMES
    rules: ValidationRules = ValidationRules()


def _config_candidates() -> list[Path]:
    return [Path.cwd() / CONFIG_FILENAME, Path.home() / ".config/frontmatter-validator/config.toml"]


def _load_config_file() -> dict[str, object]:
    for candidate in _config_candidates():
        if not candidate.exists():
            continue
        try:
            return tomllib.loads(candidate.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", candidate, exc)
            continue
    return {}


def _read_optional_str(payload: dict[str, object], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def load_settings(*, root: str | None = None) -> Settings:
    """Build the settings for one run.

    CLI arguments win over ``FRONTMATTER_VALIDATOR_ROOT``, which wins over the
    config file, which wins over the built-in defaults. Raises
    ``pydantic.ValidationError`` when the config file holds invalid values.
    """
    payload = _load_config_file()

    overrides: dict[str, object] = {}
    for key in ("exclude_substrings", "exclude_names"):
        if key in payload:
            overrides[key] = payload[key]

    rules_payload = payload.get("rules")
    if isinstance(rules_payload, dict):
        overrides["rules"] = ValidationRules.model_validate(rules_payload)

    cfg_root = _read_optional_str(payload, "root")
    resolved_root = root or os.getenv(ROOT_ENV_VAR) or cfg_root
    if resolved_root:
        overrides["root"] = Path(resolved_root)

    return Settings.model_validate(overrides)
