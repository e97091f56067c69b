"""Semantic version parsing tests."""

import pytest

from bumpguard.errors import MalformedVersionString
from bumpguard.versions import SemanticVersion, VersionField


def test_parse_reads_three_components() -> None:
    assert SemanticVersion.parse("4.61.11") == SemanticVersion(4, 61, 11)


@pytest.mark.parametrize("text", ["1.2", "1.2.3.4", "01.2.3", "1.2.x", "-1.2.3", ""])
def test_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(MalformedVersionString) as excinfo:
        SemanticVersion.parse(text)

    assert excinfo.value.text == text


def test_versions_order_lexicographically() -> None:
    assert SemanticVersion(1, 10, 0) > SemanticVersion(1, 9, 9)
    assert SemanticVersion(2, 0, 0) > SemanticVersion(1, 99, 99)


def test_str_renders_dotted_version() -> None:
    assert str(SemanticVersion(5, 9, 0)) == "5.9.0"
    assert str(VersionField.MINOR) == "minor"


def test_parse_rejects_non_ascii_digits() -> None:
    with pytest.raises(MalformedVersionString):
        SemanticVersion.parse("1١.0.0")
