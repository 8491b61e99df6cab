from __future__ import annotations

from importlib.metadata import version

from frontmatter_validator import __version__


def test_package_version_matches_metadata() -> None:
    assert __version__ == version("frontmatter-validator")
