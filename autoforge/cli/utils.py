"""Shared helpers for CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from autoforge.engine import EngineConfig, load_engine_config_from_dict
from autoforge.git import GitError, get_repo_root, get_staged_diff
from autoforge.log import get_logger
from autoforge.sanitize import is_empty_diff, sanitize_diff
from autoforge.user_config import load_config

logger = get_logger(__name__)

STDIN_MARKER = "-"


def get_effective_engine_config() -> EngineConfig:
    """Get the engine configuration of the current repository.

    Outside a repository the built-in defaults are used.
    """
    try:
        repo_root = get_repo_root()
    except GitError:
        logger.debug("Not in a git repository, using default engine config")
        return EngineConfig()
    return load_engine_config_from_dict(load_config(repo_root))


def read_diff_file(diff_file: Path) -> str:
    """Read a diff from a file, or from stdin when the path is "-".

    Raises:
        typer.Exit: If the file cannot be read.
    """
    if str(diff_file) == STDIN_MARKER:
        return typer.get_text_stream("stdin").read()

    if not diff_file.exists():
        typer.echo(f"Error: Diff file not found: {diff_file}", err=True)
        raise typer.Exit(1)
    try:
        return diff_file.read_text()
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Error reading diff file: {e}", err=True)
        raise typer.Exit(1)


def load_diff(diff_file: Optional[Path], max_diff_chars: int) -> str:
    """Load the diff to analyze and redact it.

    Args:
        diff_file: Path given with --diff-file, or None for the staged diff.
        max_diff_chars: Maximum characters of staged diff to read.

    Returns:
        The redacted diff, or an empty string if nothing analyzable remains.

    Raises:
        GitError: If the staged diff cannot be read.
        typer.Exit: If the diff file cannot be read.
    """
    if diff_file is not None:
        raw = read_diff_file(diff_file)
    else:
        raw = get_staged_diff(max_chars=max_diff_chars)

    result = sanitize_diff(raw)
    if result.sensitive_file_detected:
        logger.warning("Sensitive content was redacted from the diff before analysis")
    if is_empty_diff(result.sanitized):
        return ""
    return result.sanitized


def confirm(question: str) -> bool:
    """Ask a yes/no question defaulting to yes."""
    answer = typer.prompt(f"{question} [Y/n]", default="y", show_default=False)
    return answer.strip().lower() in ("y", "yes", "")
