"""Command-line interface for validating changelog version bumps."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import typer

from .changelog import EntryStatus, find_entry, iter_entries
from .config import BumpguardConfig, load_config
from .errors import ChangelogValidationError
from .validator import validate_changelog_file

app = typer.Typer(
    add_completion=False,
    help="bumpguard: validate your changelog's next version to prevent release errors.",
)

REPO_PATH_ENV_VAR = "REPO_PATH"


def _bumpguard_version() -> str:
    """Return the installed package version or a local fallback version."""
    try:
        return version("bumpguard")
    except PackageNotFoundError:
        return "0.0.0"


def _version_callback(value: bool) -> None:
    """Print the bumpguard version and exit when ``--version`` is requested."""
    if value:
        typer.echo(f"bumpguard {_bumpguard_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version_flag: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show bumpguard version and exit.",
    ),
) -> None:
    """Define global CLI options shared by all subcommands."""
    del version_flag


def project_root() -> Path:
    """Return the nearest ancestor directory that looks like a project root."""
    cwd = Path.cwd().resolve()

    for candidate in (cwd, *cwd.parents):
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate

    return cwd


def _resolve_root(repo_path: Optional[Path]) -> Path:
    """Return the explicit repository path, or discover one from the cwd."""
    if repo_path is not None:
        return repo_path.expanduser().resolve()
    return project_root()


def _changelog_targets(
    root: Path, cfg: BumpguardConfig, changelogs: Optional[list[Path]]
) -> list[Path]:
    """Return explicit changelog paths, or the configured one under ``root``."""
    if changelogs:
        return list(dict.fromkeys(changelogs))
    configured = Path(cfg.changelog).expanduser()
    return [configured if configured.is_absolute() else root / configured]


def _read_changelog(path: Path, encoding: str) -> str:
    """Read a changelog or exit with code 2 when it cannot be decoded."""
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Failed to open changelog '{path}': {exc}", err=True)
        raise typer.Exit(code=2)


@app.command()
def validate(
    changelogs: Optional[list[Path]] = typer.Argument(
        None,
        help="Changelog files to validate (defaults to the configured changelog).",
    ),
    repo_path: Optional[Path] = typer.Option(
        None,
        "--repo-path",
        envvar=REPO_PATH_ENV_VAR,
        help="Path to the project repository (defaults to the nearest project root).",
    ),
) -> None:
    """
    Check that the unreleased changelog entry is exactly one
    major, minor or patch bump past the last released entry.
    """
    root = _resolve_root(repo_path)
    cfg = load_config(root)

    failed: list[Path] = []
    for path in _changelog_targets(root, cfg, changelogs):
        typer.echo(f"Validating changelog: {path}")
        try:
            released, unreleased = validate_changelog_file(path, cfg.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            typer.echo(f"Failed to open changelog '{path}': {exc}", err=True)
            raise typer.Exit(code=2)
        except ChangelogValidationError as exc:
            typer.echo(f"Validation failed: {exc}", err=True)
            failed.append(path)
            continue
        typer.echo(f"Released: {released}, unreleased: {unreleased}")

    if failed:
        typer.echo(
            f"Changelog validation failed: {', '.join(str(p) for p in failed)}",
            err=True,
        )
        raise typer.Exit(code=1)

    typer.echo("✅ changelog is valid")


@app.command()
def show(
    changelog: Optional[Path] = typer.Argument(
        None, help="Changelog file to inspect (defaults to the configured changelog)."
    ),
    repo_path: Optional[Path] = typer.Option(
        None,
        "--repo-path",
        envvar=REPO_PATH_ENV_VAR,
        help="Path to the project repository (defaults to the nearest project root).",
    ),
    show_all: bool = typer.Option(
        False, "--all", help="Also list every dated and unreleased heading."
    ),
) -> None:
    """Print the released and unreleased headings validation would compare."""
    root = _resolve_root(repo_path)
    cfg = load_config(root)
    (path,) = _changelog_targets(root, cfg, [changelog] if changelog else None)
    text = _read_changelog(path, cfg.encoding)

    if show_all:
        for listed in iter_entries(text):
            typer.echo(f"  {listed.status.value:<10} {listed.heading}")

    missing = False
    for status in (EntryStatus.RELEASED, EntryStatus.UNRELEASED):
        entry = find_entry(text, status)
        if entry is None:
            typer.echo(f"{status.value}: not found")
            missing = True
        else:
            typer.echo(f"{status.value}: {entry.heading}")

    if missing:
        raise typer.Exit(code=1)
