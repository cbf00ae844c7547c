"""Git-related exception classes.

Contains:
- GitError: Base exception for git-related errors
- NoStagedChangesError: Raised when there is nothing staged to describe
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass
