"""Diff parsing and signal extraction for autoforge.

This package provides the deterministic diff-understanding pipeline with:
- models: SignalKind, ChangeVerb, DiffContext, Signal
- parser: parse_diff_context
- detectors: the individual detectors and the ordered DETECTORS pipeline
- ranking: resolve_best, rank_signals, analyze_signals, RankingConfig
"""

# Models
from autoforge.signals.models import (
    ChangeVerb,
    DiffContext,
    Signal,
    SignalDetector,
    SignalKind,
)

# Parser
from autoforge.signals.parser import parse_diff_context

# Detectors
from autoforge.signals.detectors import (
    DETECTORS,
    in_both,
    net_added,
    net_removed,
    run_detectors,
)

# Ranking
from autoforge.signals.ranking import (
    DEFAULT_MAX_SIGNALS,
    RankingConfig,
    analyze_signals,
    load_ranking_config_from_dict,
    rank_signals,
    ranking_config_to_dict,
    resolve_best,
)


__all__ = [
    # Models
    "ChangeVerb",
    "DiffContext",
    "Signal",
    "SignalDetector",
    "SignalKind",
    # Parser
    "parse_diff_context",
    # Detectors
    "DETECTORS",
    "in_both",
    "net_added",
    "net_removed",
    "run_detectors",
    # Ranking
    "DEFAULT_MAX_SIGNALS",
    "RankingConfig",
    "analyze_signals",
    "load_ranking_config_from_dict",
    "rank_signals",
    "ranking_config_to_dict",
    "resolve_best",
]
