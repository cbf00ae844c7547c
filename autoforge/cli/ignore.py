"""CLI commands for the analysis exclusion list.

Staged files matching an exclusion pattern are dropped from the diff before
signal detection, so they never influence the inferred type, scope or
description. Each command reports which currently staged files a pattern
affects.
"""

import typer

from autoforge.git import GitError, get_repo_root, get_staged_files, is_excluded_file
from autoforge.user_config import (
    ConfigError,
    add_ignore_pattern,
    get_ignore_patterns,
    remove_ignore_pattern,
)

ignore_app = typer.Typer(
    name="ignore",
    help="Exclude files from diff analysis",
    add_completion=False,
)


def _staged_matches(pattern: str, staged: list[str]) -> list[str]:
    return [path for path in staged if is_excluded_file(path, [pattern])]


def _describe_matches(matches: list[str]) -> str:
    if not matches:
        return "no staged files"
    return f"{len(matches)} staged file(s)"


@ignore_app.command("list")
def ignore_list() -> None:
    """Show exclusion patterns and the staged files each one hides."""
    try:
        repo_root = get_repo_root()
        patterns = get_ignore_patterns(repo_root)
        staged = get_staged_files(repo_root)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not patterns:
        typer.echo("No exclusion patterns; every staged file is analyzed.")
        return

    typer.echo("Excluded from analysis:")
    for pattern in patterns:
        matches = _staged_matches(pattern, staged)
        typer.echo(f"  {pattern:<24} {_describe_matches(matches)}")

    hidden = [path for path in staged if is_excluded_file(path, patterns)]
    typer.echo()
    typer.echo(f"{len(hidden)} of {len(staged)} staged file(s) excluded")


@ignore_app.command("add")
def ignore_add(
    pattern: str = typer.Argument(
        ...,
        help="Path or glob to exclude (e.g., *.snap, dist/*, package-lock.json)",
    ),
) -> None:
    """Exclude matching files from analysis."""
    try:
        repo_root = get_repo_root()
        if pattern in get_ignore_patterns(repo_root):
            typer.echo(f"Already excluded: {pattern}")
            return

        add_ignore_pattern(repo_root, pattern)
        matches = _staged_matches(pattern, get_staged_files(repo_root))
    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Excluding {pattern} ({_describe_matches(matches)} affected)")
    for path in matches:
        typer.echo(f"  {path}")


@ignore_app.command("remove")
def ignore_remove(
    pattern: str = typer.Argument(..., help="Pattern to stop excluding"),
) -> None:
    """Analyze files matching a pattern again."""
    try:
        repo_root = get_repo_root()
        removed = remove_ignore_pattern(repo_root, pattern)
    except (GitError, ConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not removed:
        typer.echo(f"Not an exclusion pattern: {pattern}", err=True)
        raise typer.Exit(1)

    typer.echo(f"No longer excluding {pattern}")
