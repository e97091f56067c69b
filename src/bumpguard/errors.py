"""Error taxonomy for changelog extraction and version bump validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .versions import SemanticVersion, VersionField


class ChangelogValidationError(RuntimeError):
    """Raised when a changelog does not describe a valid release bump."""

    def _payload(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChangelogValidationError) or type(self) is not type(
            other
        ):
            return NotImplemented
        return self._payload() == other._payload()

    def __reduce__(self) -> tuple[Any, ...]:
        # Rebuild from the payload so errors survive process pools.
        return (type(self), self._payload())

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __repr__(self) -> str:
        args = ", ".join(repr(value) for value in self._payload())
        return f"{type(self).__name__}({args})"


class ExtractionError(ChangelogValidationError):
    """Raised when the version headings cannot be read from a changelog."""


class MissingReleasedEntry(ExtractionError):
    def __init__(self) -> None:
        super().__init__("could not find previously released changelog entry")


class MissingUnreleasedEntry(ExtractionError):
    def __init__(self) -> None:
        super().__init__("could not find unreleased changelog entry")


class MalformedVersionString(ExtractionError):
    """Raised when a heading's version text is not ``major.minor.patch``."""

    def __init__(self, text: str) -> None:
        super().__init__(f"malformed version string {text!r}")
        self.text = text

    def _payload(self) -> tuple[Any, ...]:
        return (self.text,)


class BumpViolation(ChangelogValidationError):
    """Raised when the unreleased version is not a single-step bump."""


class VersionSkipped(BumpViolation):
    """Raised when a version was jumped over; ``expected`` should ship first."""

    def __init__(self, expected: SemanticVersion) -> None:
        super().__init__(f"version {expected} was skipped")
        self.expected = expected

    def _payload(self) -> tuple[Any, ...]:
        return (self.expected,)


class RetrogressiveUpdate(BumpViolation):
    """Raised when a version field was decremented."""

    def __init__(self, field: VersionField, from_: int, to: int) -> None:
        super().__init__(f"retrogressive {field} version update from {from_} to {to}")
        self.field = field
        self.from_ = from_
        self.to = to

    def _payload(self) -> tuple[Any, ...]:
        return (self.field, self.from_, self.to)


class VersionUnchanged(BumpViolation):
    def __init__(self) -> None:
        super().__init__("version did not change")
