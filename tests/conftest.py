from __future__ import annotations

from pathlib import Path

import pytest

VALID_FRONTMATTER = """---
title: "Table Naming Rules for AL Objects"
description: "How to name tables, fields and keys consistently in AL extensions."
area: "naming-conventions"
difficulty: "beginner"
object_types: ["Table", "TableExtension"]
variable_types: ["Record"]
tags: ["naming", "tables", "best-practices"]
---
"""


@pytest.fixture
def fixture_root() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def valid_text() -> str:
    return VALID_FRONTMATTER + "\n# Body\n"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("FRONTMATTER_VALIDATOR_ROOT", raising=False)
    monkeypatch.chdir(work)
    return work
