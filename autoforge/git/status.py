"""Staged file listing."""

from pathlib import Path

from autoforge.git.runner import _run_git_command


def get_staged_files(repo_root: Path = None) -> list[str]:
    """Get list of staged file paths.

    Args:
        repo_root: Directory to run git in (optional).

    Returns:
        List of staged file paths.
    """
    output = _run_git_command(["diff", "--staged", "--name-only"], cwd=repo_root)
    if not output:
        return []
    return output.split("\n")
