"""Commit description synthesis.

Renders ranked signals into a single fluent clause instead of a list of
independent labels, e.g.:

    implement addToCart and calculateTotal, and create ProductPage
    refactor promise chains to async/await
    add authentication, middleware, and input validation
"""

from autoforge.signals.models import ChangeVerb, DiffContext, Signal
from autoforge.signals.parser import parse_diff_context
from autoforge.signals.ranking import RankingConfig, analyze_signals
from autoforge.styles.constants import NO_CHANGES_DESCRIPTION
from autoforge.styles.models import DescriptionConfig


def join_with_and(items: list[str]) -> str:
    """Join items with commas and "and": ["a", "b", "c"] -> "a, b, and c"."""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def join_clauses(clauses: list[str]) -> str:
    """Join verb clauses: ["x", "y", "z"] -> "x; y, and z"."""
    if len(clauses) == 1:
        return clauses[0]
    if len(clauses) == 2:
        return f"{clauses[0]}, and {clauses[1]}"
    return f"{'; '.join(clauses[:-1])}, and {clauses[-1]}"


def dedupe_subjects(signals: list[Signal]) -> list[tuple[ChangeVerb, list[str]]]:
    """Drop subjects already claimed by an earlier signal.

    Signals left without subjects are dropped entirely.

    Args:
        signals: Ranked signals.

    Returns:
        (verb, fresh subjects) pairs in signal order.
    """
    claimed: set[str] = set()
    deduped = []
    for signal in signals:
        fresh = [s for s in signal.subjects if s not in claimed]
        if not fresh:
            continue
        claimed.update(fresh)
        deduped.append((signal.verb, fresh))
    return deduped


def synthesize(signals: list[Signal]) -> str:
    """Render signals as one clause per verb.

    Args:
        signals: Ranked signals.

    Returns:
        The description, or an empty string when there is nothing to say.
    """
    # Verbs keep the order of their first appearance
    verb_groups: dict[ChangeVerb, list[str]] = {}
    for verb, subjects in dedupe_subjects(signals):
        verb_groups.setdefault(verb, []).extend(subjects)

    clauses = [f"{verb.value} {join_with_and(subjects)}" for verb, subjects in verb_groups.items()]
    if not clauses:
        return ""
    return join_clauses(clauses)


def fallback_description(ctx: DiffContext, config: DescriptionConfig | None = None) -> str:
    """Describe a diff structurally when no signal was detected."""
    if config is None:
        config = DescriptionConfig()

    if ctx.added_lines and ctx.removed_lines:
        return "refactor existing logic" if ctx.line_delta > config.refactor_threshold else "update logic"
    if ctx.added_lines:
        return "add new functionality"
    if ctx.removed_lines:
        return "remove unused code"
    return "modify files"


def describe(ctx: DiffContext, signals: list[Signal], config: DescriptionConfig | None = None) -> str:
    """Render the description of an already analyzed diff.

    Args:
        ctx: The parsed diff.
        signals: Ranked signals for the same diff.
        config: Description configuration.

    Returns:
        A non-empty lowercase-verb description.
    """
    if not ctx.raw.strip():
        return NO_CHANGES_DESCRIPTION
    return synthesize(signals) or fallback_description(ctx, config)


def generate_smart_description(
    diff: str,
    config: DescriptionConfig | None = None,
    ranking: RankingConfig | None = None,
) -> str:
    """Analyze a raw diff and describe what changed.

    Args:
        diff: Raw output of ``git diff`` or ``git diff --cached``.
        config: Description configuration.
        ranking: Ranking configuration.

    Returns:
        A fluent description such as
        "implement addToCart and calculateTotal, and create ProductPage".
    """
    if not diff or not diff.strip():
        return NO_CHANGES_DESCRIPTION

    ctx = parse_diff_context(diff)
    return describe(ctx, analyze_signals(ctx, ranking), config)
