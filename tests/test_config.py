"""Configuration parsing tests for bumpguard."""

from pathlib import Path

from bumpguard.config import BumpguardConfig, load_config


def _write_pyproject(tmp_path: Path, content: str) -> None:
    (tmp_path / "pyproject.toml").write_text(content, encoding="utf-8")


def test_load_config_defaults_when_missing() -> None:
    cfg = load_config(Path("/tmp/non-existent-config-root"))
    assert cfg == BumpguardConfig()


def test_load_config_reads_tool_section(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        """
[tool.bumpguard]
changelog = "  docs/CHANGES.md  "
encoding = " UTF-16 "
""",
    )

    cfg = load_config(tmp_path)

    assert cfg.changelog == "docs/CHANGES.md"
    assert cfg.encoding == "utf-16"


def test_load_config_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        """
[tool.bumpguard]
changelog = "  "
encoding = "not-a-codec"
""",
    )

    cfg = load_config(tmp_path)

    assert cfg == BumpguardConfig()


def test_load_config_rejects_non_string_values(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        """
[tool.bumpguard]
changelog = 3
encoding = true
""",
    )

    assert load_config(tmp_path) == BumpguardConfig()


def test_load_config_ignores_non_table_section(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, 'tool = "bumpguard"\n')

    assert load_config(tmp_path) == BumpguardConfig()


def test_load_config_invalid_toml_falls_back_to_defaults(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        """
[tool.bumpguard
invalid = true
""",
    )

    cfg = load_config(tmp_path)

    assert cfg == BumpguardConfig()
