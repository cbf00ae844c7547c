"""Git branch and commit utilities.

Contains:
- get_branch: Get the current branch name
- validate_branch_name: Check a generated name against git's ref rules
- create_branch: Create and switch to a new branch
- commit_with_message: Commit the staged changes
"""

from autoforge.git.exceptions import GitError
from autoforge.git.runner import _run_git_command

MAX_BRANCH_NAME_LENGTH = 200


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD (detached)' in detached state.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        return "HEAD (detached)"
    return branch


def validate_branch_name(name: str) -> None:
    """Validate a branch name before it is used.

    Args:
        name: Candidate branch name.

    Raises:
        GitError: If the name is empty, too long, or rejected by git.
    """
    if not name or not name.strip():
        raise GitError("Branch name cannot be empty.")
    if len(name) > MAX_BRANCH_NAME_LENGTH:
        raise GitError(f"Branch name is longer than {MAX_BRANCH_NAME_LENGTH} characters.")
    try:
        _run_git_command(["check-ref-format", "--branch", name])
    except GitError:
        raise GitError(f"Invalid branch name: {name}")


def create_branch(name: str) -> None:
    """Create ``name`` from the current HEAD and switch to it.

    Raises:
        GitError: If the name is invalid or the branch already exists.
    """
    validate_branch_name(name)
    _run_git_command(["checkout", "-b", name])


def commit_with_message(message: str) -> str:
    """Commit the staged changes with ``message``.

    Returns:
        Git's commit summary output.

    Raises:
        GitError: If the commit fails.
    """
    return _run_git_command(["commit", "-m", message])
