"""Validate that a changelog's unreleased entry is a single-step semver bump."""

from __future__ import annotations

from .bump import classify_bump
from .changelog import ChangelogEntry, EntryStatus, extract_versions
from .errors import (
    BumpViolation,
    ChangelogValidationError,
    ExtractionError,
    MalformedVersionString,
    MissingReleasedEntry,
    MissingUnreleasedEntry,
    RetrogressiveUpdate,
    VersionSkipped,
    VersionUnchanged,
)
from .validator import validate_changelog
from .versions import SemanticVersion, VersionField

__all__ = [
    "BumpViolation",
    "ChangelogEntry",
    "ChangelogValidationError",
    "EntryStatus",
    "ExtractionError",
    "MalformedVersionString",
    "MissingReleasedEntry",
    "MissingUnreleasedEntry",
    "RetrogressiveUpdate",
    "SemanticVersion",
    "VersionField",
    "VersionSkipped",
    "VersionUnchanged",
    "classify_bump",
    "extract_versions",
    "validate_changelog",
]
