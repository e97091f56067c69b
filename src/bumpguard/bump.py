"""Classify the transition from the last released version to the next one."""

from __future__ import annotations

from .errors import RetrogressiveUpdate, VersionSkipped, VersionUnchanged
from .versions import SemanticVersion, VersionField


def classify_bump(old: SemanticVersion, new: SemanticVersion) -> None:
    """Validate that ``new`` is exactly one major, minor or patch step past ``old``.

    Fields are checked from most to least significant and the first irregular
    field decides the outcome, so a major regression hides any minor or patch
    problem. Raises a ``BumpViolation`` subclass when the bump is invalid.
    """
    if new.major == old.major + 1:
        if new.minor == 0 and new.patch == 0:
            return
        raise VersionSkipped(SemanticVersion(new.major, 0, 0))
    if new.major > old.major:
        raise VersionSkipped(SemanticVersion(old.major + 1, 0, 0))
    if new.major < old.major:
        raise RetrogressiveUpdate(VersionField.MAJOR, old.major, new.major)

    if new.minor == old.minor + 1:
        if new.patch == 0:
            return
        raise VersionSkipped(SemanticVersion(new.major, new.minor, 0))
    if new.minor > old.minor:
        raise VersionSkipped(SemanticVersion(new.major, old.minor + 1, 0))
    if new.minor < old.minor:
        raise RetrogressiveUpdate(VersionField.MINOR, old.minor, new.minor)

    if new.patch == old.patch + 1:
        return
    if new.patch > old.patch:
        raise VersionSkipped(SemanticVersion(new.major, new.minor, old.patch + 1))
    if new.patch < old.patch:
        raise RetrogressiveUpdate(VersionField.PATCH, old.patch, new.patch)

    raise VersionUnchanged()
