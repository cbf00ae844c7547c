"""Commit type inference for autoforge.

Contains:
- TypeRule: One entry of the priority-ordered rule table
- TYPE_RULES: Rules mapping a single signal to a conventional commit type
- infer_type_from_files: Path-based classification (docs, tests, build files)
- infer_commit_type: Resolve the commit type of a ranked signal set
"""

from dataclasses import dataclass
from typing import Callable, Optional

from autoforge.scope import is_docs_file, is_test_file, normalize_path
from autoforge.signals.models import ChangeVerb, Signal, SignalKind
from autoforge.signals.ranking import resolve_best
from autoforge.styles.constants import DEFAULT_COMMIT_TYPE


@dataclass(frozen=True)
class TypeRule:
    """A rule mapping a matching signal to a commit type.

    Attributes:
        name: Short label used in debug output.
        matches: Predicate over a single signal.
        commit_type: Type produced when the predicate holds.
        priority: Higher priorities override lower ones across all signals.
    """

    name: str
    matches: Callable[[Signal], bool]
    commit_type: str
    priority: int


_FEATURE_VERBS = {ChangeVerb.IMPLEMENT, ChangeVerb.CREATE, ChangeVerb.ADD, ChangeVerb.UPDATE}

# Specific classifications must not lose to the broad feature fallback
TYPE_RULES: tuple[TypeRule, ...] = (
    TypeRule(
        "error-handling",
        lambda s: s.kind == SignalKind.ERROR_HANDLING and s.verb in (ChangeVerb.ADD, ChangeVerb.REFACTOR),
        "fix",
        100,
    ),
    TypeRule(
        "optimization",
        lambda s: s.kind == SignalKind.PERFORMANCE or s.verb == ChangeVerb.OPTIMIZE,
        "perf",
        90,
    ),
    TypeRule("tests", lambda s: s.kind == SignalKind.TEST, "test", 80),
    TypeRule("dependencies", lambda s: s.kind == SignalKind.DEPENDENCY, "build", 70),
    TypeRule("configuration", lambda s: s.kind == SignalKind.CONFIG, "chore", 60),
    TypeRule("restructure", lambda s: s.verb in (ChangeVerb.REFACTOR, ChangeVerb.RENAME), "refactor", 50),
    TypeRule(
        "logging-cleanup",
        lambda s: s.kind == SignalKind.LOGGING and s.verb == ChangeVerb.REMOVE,
        "style",
        40,
    ),
    TypeRule("removal", lambda s: s.verb == ChangeVerb.REMOVE, "chore", 30),
    TypeRule("feature", lambda s: s.verb in _FEATURE_VERBS, "feat", 10),
)

BUILD_FILES = {
    "package.json",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "pyproject.toml",
    "poetry.lock",
    "setup.py",
    "setup.cfg",
    "requirements.txt",
    "Makefile",
    "CMakeLists.txt",
    "Cargo.toml",
    "Cargo.lock",
    "go.mod",
    "go.sum",
    "Gemfile",
    "Gemfile.lock",
    "Dockerfile",
}


def match_type_rule(
    signals: list[Signal],
    rules: tuple[TypeRule, ...] = TYPE_RULES,
) -> Optional[TypeRule]:
    """Find the highest-priority rule matched by any signal.

    Args:
        signals: Ranked signals.
        rules: Rule table in declaration order.

    Returns:
        The winning rule, or None if nothing matched.
    """
    matched = (rule for signal in signals for rule in rules if rule.matches(signal))
    return resolve_best(matched, lambda rule: rule.priority)


def infer_type_from_files(files: list[str]) -> Optional[str]:
    """Infer commit type from touched file paths alone.

    Args:
        files: Touched file paths.

    Returns:
        "docs", "test" or "build" when every file agrees, None otherwise.
    """
    if not files:
        return None

    # Build manifests first, requirements.txt would otherwise read as docs
    if all(normalize_path(f).split("/")[-1] in BUILD_FILES for f in files):
        return "build"

    if all(is_docs_file(f) for f in files):
        return "docs"

    if all(is_test_file(f) for f in files):
        return "test"

    return None


def infer_commit_type(signals: list[Signal], files: Optional[list[str]] = None) -> str:
    """Infer the conventional commit type of a change.

    Every rule is evaluated against every signal and the highest-priority
    match wins. When no signal matches a rule, the touched files are
    classified instead, and "chore" is the final fallback.

    Args:
        signals: Ranked signals.
        files: Touched file paths.

    Returns:
        The commit type.
    """
    rule = match_type_rule(signals)
    if rule is not None:
        return rule.commit_type

    return infer_type_from_files(list(files or [])) or DEFAULT_COMMIT_TYPE
