"""Locate released and unreleased version headings in changelog text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .errors import MissingReleasedEntry, MissingUnreleasedEntry
from .versions import SemanticVersion

TAG_PATTERN = r"\d+\.\d+\.\d+"
ENTRY_PATTERN = rf"^## (?P<version>{TAG_PATTERN})"
RELEASED_ENTRY_RE = re.compile(
    ENTRY_PATTERN + r" \([A-Z][a-z]+ \d{1,2}, \d{4}\)",
    flags=re.MULTILINE | re.ASCII,
)
UNRELEASED_ENTRY_RE = re.compile(
    ENTRY_PATTERN + r" \(Unreleased\)", flags=re.MULTILINE | re.ASCII
)


class EntryStatus(str, Enum):
    RELEASED = "released"
    UNRELEASED = "unreleased"


_PATTERNS = {
    EntryStatus.RELEASED: RELEASED_ENTRY_RE,
    EntryStatus.UNRELEASED: UNRELEASED_ENTRY_RE,
}


@dataclass(frozen=True)
class ChangelogEntry:
    """A version heading found in a changelog."""

    heading: str
    version_text: str
    status: EntryStatus

    def version(self) -> SemanticVersion:
        """Parse the heading's version text, raising ``MalformedVersionString``."""
        return SemanticVersion.parse(self.version_text)


def _entry(match: re.Match[str], status: EntryStatus) -> ChangelogEntry:
    return ChangelogEntry(
        heading=match.group(0),
        version_text=match.group("version"),
        status=status,
    )


def find_entry(text: str, status: EntryStatus) -> Optional[ChangelogEntry]:
    """Return the first heading with ``status`` in document order, if any."""
    match = _PATTERNS[status].search(text)
    if match is None:
        return None
    return _entry(match, status)


def iter_entries(text: str) -> Iterator[ChangelogEntry]:
    """Yield every released and unreleased heading in document order."""
    matches = [
        (match.start(), _entry(match, status))
        for status, pattern in _PATTERNS.items()
        for match in pattern.finditer(text)
    ]
    for _, entry in sorted(matches, key=lambda item: item[0]):
        yield entry


def extract_versions(text: str) -> tuple[SemanticVersion, SemanticVersion]:
    """Return ``(released, unreleased)`` versions parsed from changelog text.

    Each heading kind is searched independently and its first match wins, so
    the unreleased entry may sit above or below the last release.
    """
    released = find_entry(text, EntryStatus.RELEASED)
    if released is None:
        raise MissingReleasedEntry()
    released_version = released.version()

    unreleased = find_entry(text, EntryStatus.UNRELEASED)
    if unreleased is None:
        raise MissingUnreleasedEntry()
    return released_version, unreleased.version()
