from __future__ import annotations

from pathlib import Path

from frontmatter_validator.discovery.finder import (
    discover_documents,
    discover_documents_with_diagnostics,
    is_candidate,
)


def _touch(path: Path, text: str = "# doc\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_discover_fixture_areas(fixture_root: Path) -> None:
    root = fixture_root / "areas"
    documents = discover_documents(root)

    assert [path.relative_to(root).as_posix() for path in documents] == [
        "code-formatting/indentation.md",
        "error-handling/error-label-patterns.md",
        "naming-conventions/table-naming-rules.md",
    ]


def test_readme_and_samples_are_excluded(tmp_path: Path) -> None:
    root = tmp_path / "areas"
    _touch(root / "README.md")
    _touch(root / "nested" / "README.md")
    _touch(root / "nested" / "al-samples.md")
    _touch(root / "nested" / "Samples-index.md")
    _touch(root / "nested" / "readme.md")
    _touch(root / "nested" / "notes.txt")
    _touch(root / "nested" / "UPPER.MD")

    discovered = {path.name for path in discover_documents(root)}

    assert discovered == {"Samples-index.md", "readme.md", "UPPER.MD"}


def test_is_candidate_respects_custom_exclusions() -> None:
    assert is_candidate(Path("a/draft-guide.md"))
    assert not is_candidate(Path("a/draft-guide.md"), exclude_substrings=("draft",))
    assert not is_candidate(Path("a/INDEX.md"), exclude_names=("INDEX.md",))


def test_missing_root_returns_diagnostic(tmp_path: Path) -> None:
    documents, warnings = discover_documents_with_diagnostics(tmp_path / "missing")

    assert documents == []
    assert any("Path not found" in warning for warning in warnings)


def test_single_file_root_is_returned_as_is(tmp_path: Path) -> None:
    doc = _touch(tmp_path / "README.md")

    assert discover_documents(doc) == [doc]


def test_walk_errors_become_diagnostics(tmp_path: Path, monkeypatch) -> None:
    root = tmp_path / "areas"
    _touch(root / "guide.md")
    original_rglob = Path.rglob

    def _broken_rglob(self: Path, pattern: str):
        if str(self) == str(root):
            raise PermissionError("access denied")
        return original_rglob(self, pattern)

    monkeypatch.setattr(Path, "rglob", _broken_rglob)

    documents, warnings = discover_documents_with_diagnostics(root)
    assert documents == []
    assert any("PermissionError" in warning for warning in warnings)
