"""Configuration utilities for autoforge styles.

Contains functions for:
- Loading BranchConfig and DescriptionConfig from a configuration dictionary
- Converting them back to dictionaries for saving
"""

from autoforge.styles.constants import (
    DEFAULT_BRANCH_SIGNALS,
    DEFAULT_BRANCH_STOP_WORDS,
    DEFAULT_BRANCH_SUBJECTS,
    DEFAULT_MAX_SLUG_LENGTH,
    DEFAULT_MIN_CUT_INDEX,
    DEFAULT_REFACTOR_THRESHOLD,
)
from autoforge.styles.models import BranchConfig, DescriptionConfig


def _positive_int(value, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def _section(config_dict: dict, name: str) -> dict:
    """Return a named config section, or {} when it is missing or not a mapping."""
    section = config_dict.get(name)
    return section if isinstance(section, dict) else {}


def load_branch_config_from_dict(config_dict: dict) -> BranchConfig:
    """Load BranchConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with branch configuration.

    Returns:
        BranchConfig instance.
    """
    branch_section = _section(config_dict, "branch")

    stop_words = branch_section.get("stop_words", None)
    if not isinstance(stop_words, list):
        stop_words = DEFAULT_BRANCH_STOP_WORDS.copy()
    else:
        stop_words = {str(word).lower() for word in stop_words}

    min_cut_index = branch_section.get("min_cut_index", DEFAULT_MIN_CUT_INDEX)
    if isinstance(min_cut_index, bool) or not isinstance(min_cut_index, int) or min_cut_index < 0:
        min_cut_index = DEFAULT_MIN_CUT_INDEX

    return BranchConfig(
        max_slug_length=_positive_int(branch_section.get("max_slug_length"), DEFAULT_MAX_SLUG_LENGTH),
        max_signals=_positive_int(branch_section.get("max_signals"), DEFAULT_BRANCH_SIGNALS),
        max_subjects=_positive_int(branch_section.get("max_subjects"), DEFAULT_BRANCH_SUBJECTS),
        min_cut_index=min_cut_index,
        stop_words=stop_words,
    )


def branch_config_to_dict(config: BranchConfig) -> dict:
    """Convert BranchConfig to a dictionary for saving.

    Args:
        config: BranchConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "branch": {
            "max_slug_length": config.max_slug_length,
            "max_signals": config.max_signals,
            "max_subjects": config.max_subjects,
            "min_cut_index": config.min_cut_index,
            "stop_words": sorted(config.stop_words),
        }
    }


def load_description_config_from_dict(config_dict: dict) -> DescriptionConfig:
    """Load DescriptionConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with description configuration.

    Returns:
        DescriptionConfig instance.
    """
    description_section = _section(config_dict, "description")

    threshold = description_section.get("refactor_threshold", DEFAULT_REFACTOR_THRESHOLD)
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        threshold = DEFAULT_REFACTOR_THRESHOLD

    return DescriptionConfig(refactor_threshold=threshold)


def description_config_to_dict(config: DescriptionConfig) -> dict:
    """Convert DescriptionConfig to a dictionary for saving."""
    return {"description": {"refactor_threshold": config.refactor_threshold}}
