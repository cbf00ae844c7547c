"""Git diff utilities.

Contains:
- get_staged_diff: Get the staged diff, excluding ignored files
- is_excluded_file: Check if a file should be excluded based on patterns
- DEFAULT_DIFF_EXCLUDE_PATTERNS: Patterns used outside a repository
"""

import fnmatch
from pathlib import Path

from autoforge.git.exceptions import GitError, NoStagedChangesError
from autoforge.git.runner import _run_git_command, get_repo_root
from autoforge.git.status import get_staged_files
from autoforge.log import get_logger
from autoforge.user_config import get_ignore_patterns

logger = get_logger(__name__)

# Used when no repository config can be located
DEFAULT_DIFF_EXCLUDE_PATTERNS = [
    "poetry.lock",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "Cargo.lock",
    "Gemfile.lock",
    "composer.lock",
    "go.sum",
]

TRUNCATION_MARKER = "\n...[truncated]\n"


def is_excluded_file(filename: str, patterns: list[str]) -> bool:
    """Check if a file should be excluded based on patterns.

    Supports exact names and glob patterns (``*.lock``, ``build/*``) matched
    against both the full path and the basename.

    Args:
        filename: The file path to check.
        patterns: List of patterns to match against.

    Returns:
        True if the file should be excluded.
    """
    for pattern in patterns:
        if filename == pattern:
            return True
        if fnmatch.fnmatch(filename, pattern):
            return True
        if fnmatch.fnmatch(Path(filename).name, pattern):
            return True
    return False


def get_staged_diff(max_chars: int = 50000, repo_root: Path = None) -> str:
    """Get the staged diff, excluding ignored files and truncating if necessary.

    Args:
        max_chars: Maximum characters for the diff output.
        repo_root: The root directory of the git repository (optional).

    Returns:
        The staged diff, or an empty string if only ignored files are staged.

    Raises:
        NoStagedChangesError: If there are no staged changes.
        GitError: If a git command fails.
    """
    if repo_root:
        ignore_patterns = get_ignore_patterns(repo_root)
    else:
        try:
            repo_root = get_repo_root()
            ignore_patterns = get_ignore_patterns(repo_root)
        except GitError:
            ignore_patterns = DEFAULT_DIFF_EXCLUDE_PATTERNS

    staged_files = get_staged_files(repo_root)
    if not staged_files:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    files_to_include = [f for f in staged_files if not is_excluded_file(f, ignore_patterns)]
    skipped = len(staged_files) - len(files_to_include)
    if skipped:
        logger.debug("Excluded %d ignored file(s) from the diff", skipped)

    if not files_to_include:
        return ""

    diff = _run_git_command(["diff", "--staged", "--"] + files_to_include, cwd=repo_root)
    if not diff:
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    if len(diff) > max_chars:
        diff = diff[:max_chars] + TRUNCATION_MARKER

    return diff
