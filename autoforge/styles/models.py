"""Configuration models for autoforge renderers.

Contains:
- BranchConfig: Limits and vocabulary for branch slug generation
- DescriptionConfig: Thresholds for the structural fallback description
"""

from dataclasses import dataclass, field

from autoforge.styles.constants import (
    DEFAULT_BRANCH_SIGNALS,
    DEFAULT_BRANCH_STOP_WORDS,
    DEFAULT_BRANCH_SUBJECTS,
    DEFAULT_MAX_SLUG_LENGTH,
    DEFAULT_MIN_CUT_INDEX,
    DEFAULT_REFACTOR_THRESHOLD,
)


@dataclass
class BranchConfig:
    """Configuration for branch slug generation."""

    max_slug_length: int = DEFAULT_MAX_SLUG_LENGTH
    max_signals: int = DEFAULT_BRANCH_SIGNALS  # Signals rendered into the slug
    max_subjects: int = DEFAULT_BRANCH_SUBJECTS  # Subjects per signal
    min_cut_index: int = DEFAULT_MIN_CUT_INDEX

    stop_words: set[str] = field(default_factory=lambda: DEFAULT_BRANCH_STOP_WORDS.copy())


@dataclass
class DescriptionConfig:
    """Configuration for commit descriptions."""

    refactor_threshold: int = DEFAULT_REFACTOR_THRESHOLD
