"""Git access for autoforge.

This package wraps the git CLI with:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, get_repo_root
- status: get_staged_files
- diff: get_staged_diff, is_excluded_file, DEFAULT_DIFF_EXCLUDE_PATTERNS
- branch: get_branch, validate_branch_name, create_branch, commit_with_message
"""

# Exceptions
from autoforge.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from autoforge.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Status utilities
from autoforge.git.status import get_staged_files

# Diff utilities
from autoforge.git.diff import (
    DEFAULT_DIFF_EXCLUDE_PATTERNS,
    TRUNCATION_MARKER,
    get_staged_diff,
    is_excluded_file,
)

# Branch and commit utilities
from autoforge.git.branch import (
    MAX_BRANCH_NAME_LENGTH,
    commit_with_message,
    create_branch,
    get_branch,
    validate_branch_name,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Status
    "get_staged_files",
    # Diff
    "DEFAULT_DIFF_EXCLUDE_PATTERNS",
    "TRUNCATION_MARKER",
    "get_staged_diff",
    "is_excluded_file",
    # Branch
    "MAX_BRANCH_NAME_LENGTH",
    "commit_with_message",
    "create_branch",
    "get_branch",
    "validate_branch_name",
]
