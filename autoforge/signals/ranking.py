"""Signal aggregation and ranking.

Contains:
- resolve_best: Stable max-by-priority reduction over an ordered sequence
- rank_signals: Keep the best signal per kind, sort by score, cap the list
- analyze_signals: Run the detector pipeline and rank its output
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TypeVar

from autoforge.log import get_logger
from autoforge.signals.detectors import DETECTORS, run_detectors
from autoforge.signals.models import DiffContext, Signal, SignalDetector, SignalKind

T = TypeVar("T")

logger = get_logger(__name__)

DEFAULT_MAX_SIGNALS = 4


@dataclass
class RankingConfig:
    """Configuration for signal ranking."""

    max_signals: int = DEFAULT_MAX_SIGNALS


def resolve_best(candidates: Iterable[T], priority: Callable[[T], int]) -> Optional[T]:
    """Return the candidate with the highest priority.

    Candidates are visited in order and only a strictly higher priority
    replaces the current best, so the earliest candidate wins ties.

    Args:
        candidates: Ordered candidates.
        priority: Function giving each candidate its priority.

    Returns:
        The winning candidate, or None when there are no candidates.
    """
    best = None
    best_priority = None
    for candidate in candidates:
        value = priority(candidate)
        if best_priority is None or value > best_priority:
            best = candidate
            best_priority = value
    return best


def rank_signals(signals: list[Signal], max_signals: int = DEFAULT_MAX_SIGNALS) -> list[Signal]:
    """Deduplicate signals by kind and rank them by score.

    Args:
        signals: Raw detector output in pipeline order.
        max_signals: Maximum number of signals to keep.

    Returns:
        At most ``max_signals`` signals, one per kind, sorted by descending
        score with ties kept in pipeline order.
    """
    # Kinds in order of first appearance
    kinds: list[SignalKind] = list(dict.fromkeys(signal.kind for signal in signals))

    best_by_kind = []
    for kind in kinds:
        best = resolve_best((s for s in signals if s.kind == kind), lambda s: s.score)
        best_by_kind.append(best)

    ranked = sorted(best_by_kind, key=lambda s: -s.score)
    return ranked[:max_signals]


def analyze_signals(
    ctx: DiffContext,
    config: RankingConfig | None = None,
    detectors: tuple[SignalDetector, ...] = DETECTORS,
) -> list[Signal]:
    """Run all detectors and return the top-ranked, deduplicated signals.

    Args:
        ctx: The parsed diff.
        config: Ranking configuration.
        detectors: Detectors in priority order.

    Returns:
        The ranked signal set.
    """
    if config is None:
        config = RankingConfig()

    raw_signals = run_detectors(ctx, detectors)
    ranked = rank_signals(raw_signals, config.max_signals)

    logger.debug(
        "Detected %d raw signals, kept %d: %s",
        len(raw_signals),
        len(ranked),
        ", ".join(f"{s.kind.value}:{s.score}" for s in ranked) or "(none)",
    )
    return ranked


def load_ranking_config_from_dict(config_dict: dict) -> RankingConfig:
    """Load RankingConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with ranking configuration.

    Returns:
        RankingConfig instance.
    """
    section = config_dict.get("ranking")
    if not isinstance(section, dict):
        section = {}

    max_signals = section.get("max_signals", DEFAULT_MAX_SIGNALS)
    if isinstance(max_signals, bool) or not isinstance(max_signals, int) or max_signals < 1:
        max_signals = DEFAULT_MAX_SIGNALS

    return RankingConfig(max_signals=max_signals)


def ranking_config_to_dict(config: RankingConfig) -> dict:
    """Convert RankingConfig to a dictionary for saving."""
    return {"ranking": {"max_signals": config.max_signals}}
