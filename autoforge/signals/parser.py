"""Diff parsing into a DiffContext."""

import re

from autoforge.signals.models import DiffContext


_FILE_HEADER_PATTERN = re.compile(r"^diff --git a/(.+?) b/", re.MULTILINE)


def _is_added(line: str) -> bool:
    return line.startswith("+") and not line.startswith("+++")


def _is_removed(line: str) -> bool:
    return line.startswith("-") and not line.startswith("---")


def parse_diff_context(diff: str) -> DiffContext:
    """Split raw diff text into structured facts.

    Malformed input is never an error: a diff without headers or content
    lines simply yields empty sequences and a zero delta.

    Args:
        diff: Raw output of ``git diff`` (possibly redacted or truncated).

    Returns:
        The parsed DiffContext.
    """
    diff = diff or ""
    lines = diff.split("\n")

    added_lines = tuple(line[1:] for line in lines if _is_added(line))
    removed_lines = tuple(line[1:] for line in lines if _is_removed(line))
    file_names = tuple(_FILE_HEADER_PATTERN.findall(diff))

    return DiffContext(
        raw=diff,
        lower=diff.lower(),
        added_lines=added_lines,
        removed_lines=removed_lines,
        added_content="\n".join(added_lines),
        removed_content="\n".join(removed_lines),
        file_names=file_names,
        line_delta=len(added_lines) - len(removed_lines),
    )
