"""Configuration loading and normalization for ``[tool.bumpguard]`` settings."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib  # py311+  # type: ignore
except ImportError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[import-not-found,no-redef]

TOMLDecodeError = getattr(tomllib, "TOMLDecodeError", ValueError)


@dataclass(frozen=True)
class BumpguardConfig:
    """Validated runtime configuration for bumpguard commands."""

    changelog: str = "CHANGELOG.md"
    encoding: str = "utf-8"


def _parse_path(value: Any, default: str) -> str:
    """Parse a configured path and fall back when it is blank or invalid."""
    if isinstance(value, str):
        normalized = value.strip()
        if normalized:
            return normalized
    return default


def _parse_encoding(value: Any, default: str) -> str:
    """Return ``value`` when it names a codec Python can decode with."""
    if not isinstance(value, str):
        return default
    normalized = value.strip().lower()
    try:
        codecs.lookup(normalized)
    except LookupError:
        return default
    return normalized


def load_config(project_root: Path) -> BumpguardConfig:
    """Load ``[tool.bumpguard]`` from ``pyproject.toml`` and return a validated config."""
    pyproject = project_root / "pyproject.toml"
    if not pyproject.exists():
        return BumpguardConfig()

    data: dict[str, Any]
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except TOMLDecodeError:
        return BumpguardConfig()

    tool = data.get("tool", {})
    section = tool.get("bumpguard", {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict):
        return BumpguardConfig()

    base = BumpguardConfig()
    return BumpguardConfig(
        changelog=_parse_path(section.get("changelog"), base.changelog),
        encoding=_parse_encoding(section.get("encoding"), base.encoding),
    )
