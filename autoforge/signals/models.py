"""Data models for the signal pipeline.

Contains:
- SignalKind: Closed set of change categories a detector can report
- ChangeVerb: Closed set of intents attached to a signal
- DiffContext: Immutable facts parsed once from a raw diff
- Signal: A scored, categorized piece of evidence about one change
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class SignalKind(Enum):
    """Categories of change a detector can report."""

    FUNCTION = "function"
    CLASS = "class"
    COMPONENT = "component"
    HOOK = "hook"
    ROUTE = "route"
    MIDDLEWARE = "middleware"
    AUTH = "auth"
    VALIDATION = "validation"
    ERROR_HANDLING = "error-handling"
    ASYNC = "async"
    DATABASE = "database"
    CONFIG = "config"
    DEPENDENCY = "dependency"
    TEST = "test"
    LOGGING = "logging"
    PERFORMANCE = "performance"
    TYPE = "type"
    GENERIC = "generic"


class ChangeVerb(Enum):
    """What happened to the subjects of a signal."""

    IMPLEMENT = "implement"
    ADD = "add"
    REMOVE = "remove"
    REFACTOR = "refactor"
    UPDATE = "update"
    RENAME = "rename"
    OPTIMIZE = "optimize"
    CREATE = "create"


@dataclass(frozen=True)
class DiffContext:
    """Facts derived once from a raw diff and shared by all detectors.

    Attributes:
        raw: The diff text as received.
        lower: Lowercase copy of the diff.
        added_lines: Bodies of added lines, prefix stripped.
        removed_lines: Bodies of removed lines, prefix stripped.
        added_content: Added lines joined with newlines.
        removed_content: Removed lines joined with newlines.
        file_names: Paths taken from ``diff --git`` headers.
        line_delta: Added line count minus removed line count.
    """

    raw: str
    lower: str
    added_lines: tuple[str, ...]
    removed_lines: tuple[str, ...]
    added_content: str
    removed_content: str
    file_names: tuple[str, ...]
    line_delta: int


@dataclass(frozen=True)
class Signal:
    """A scored piece of evidence extracted from a diff.

    Attributes:
        kind: Category of the change, used for grouping and dedup.
        subjects: Named entities or short phrases; the first one is primary.
        verb: Intent of the change.
        score: Confidence weight; higher wins when kinds collide.
    """

    kind: SignalKind
    subjects: tuple[str, ...]
    verb: ChangeVerb
    score: int


SignalDetector = Callable[[DiffContext], list[Signal]]
