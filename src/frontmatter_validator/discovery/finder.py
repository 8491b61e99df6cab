from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
DEFAULT_EXCLUDE_SUBSTRINGS = ("samples",)
DEFAULT_EXCLUDE_NAMES = ("README.md",)


@dataclass
class DiscoveryDiagnostics:
    warnings: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        logger.info("discovery warning: %s", message)


def _warn_oserror(diagnostics: DiscoveryDiagnostics, context: str, error: OSError) -> None:
    diagnostics.warn(f"{context}: {error.__class__.__name__}: {error}")


def is_candidate(
    path: Path,
    *,
    exclude_substrings: Iterable[str] = DEFAULT_EXCLUDE_SUBSTRINGS,
    exclude_names: Iterable[str] = DEFAULT_EXCLUDE_NAMES,
) -> bool:
    name = path.name
    if path.suffix.lower() != MARKDOWN_SUFFIX:
        return False
    if name in set(exclude_names):
        return False
    return not any(needle in name for needle in exclude_substrings)


def _iter_files(root: Path, diagnostics: DiscoveryDiagnostics) -> list[Path]:
    files: list[Path] = []
    try:
        iterator = root.rglob("*")
    except OSError as error:
        _warn_oserror(diagnostics, f"failed walking files under '{root}'", error)
        return files

    while True:
        try:
            file_path = next(iterator)
        except StopIteration:
            break
        except OSError as error:
            _warn_oserror(diagnostics, f"failed walking files under '{root}'", error)
            break
        try:
            if not file_path.is_file():
                continue
        except OSError as error:
            _warn_oserror(diagnostics, f"failed reading file metadata '{file_path}'", error)
            continue
        files.append(file_path)

    return files


def discover_documents_with_diagnostics(
    root: Path,
    *,
    exclude_substrings: Iterable[str] = DEFAULT_EXCLUDE_SUBSTRINGS,
    exclude_names: Iterable[str] = DEFAULT_EXCLUDE_NAMES,
) -> tuple[list[Path], list[str]]:
    diagnostics = DiscoveryDiagnostics()
    substrings = tuple(exclude_substrings)
    names = tuple(exclude_names)

    try:
        if root.is_file():
            # An explicitly named file is validated even if it would be excluded during a walk.
            return [root], diagnostics.warnings
        if not root.is_dir():
            diagnostics.warn(f"Path not found: {root}")
            return [], diagnostics.warnings
    except OSError as error:
        _warn_oserror(diagnostics, f"failed inspecting '{root}'", error)
        return [], diagnostics.warnings

    documents = [
        path
        for path in _iter_files(root, diagnostics)
        if is_candidate(path, exclude_substrings=substrings, exclude_names=names)
    ]
    documents.sort(key=lambda item: str(item))
    logger.info("Discovered %s markdown documents under %s", len(documents), root)
    return documents, diagnostics.warnings


def discover_documents(
    root: Path,
    *,
    exclude_substrings: Iterable[str] = DEFAULT_EXCLUDE_SUBSTRINGS,
    exclude_names: Iterable[str] = DEFAULT_EXCLUDE_NAMES,
) -> list[Path]:
    documents, _ = discover_documents_with_diagnostics(
        root,
        exclude_substrings=exclude_substrings,
        exclude_names=exclude_names,
    )
    return documents
