"""Semantic version values used by changelog validation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import MalformedVersionString

VERSION_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)$", flags=re.ASCII
)


class VersionField(str, Enum):
    """A single component of a ``major.minor.patch`` version."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class SemanticVersion:
    """Immutable ``(major, minor, patch)`` triple ordered lexicographically."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Parse ``text`` as three non-negative integers without leading zeros."""
        match = VERSION_RE.match(text.strip())
        if match is None:
            raise MalformedVersionString(text)
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
