"""Chain changelog extraction and bump classification."""

from __future__ import annotations

from pathlib import Path

from .bump import classify_bump
from .changelog import extract_versions
from .versions import SemanticVersion


def validate_changelog(text: str) -> tuple[SemanticVersion, SemanticVersion]:
    """Validate changelog text and return the ``(released, unreleased)`` pair."""
    released, unreleased = extract_versions(text)
    classify_bump(released, unreleased)
    return released, unreleased


def validate_changelog_file(
    changelog_path: Path, encoding: str = "utf-8"
) -> tuple[SemanticVersion, SemanticVersion]:
    """Read ``changelog_path`` and validate its contents."""
    return validate_changelog(changelog_path.read_text(encoding=encoding))
