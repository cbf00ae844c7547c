"""Offline label engine.

Produces a conventional commit message or a branch name from a diff without
any network call. This is the entry point used by the CLI and by callers that
hand over a full prompt ("Create a branch name ... Diff: ...") instead of a
bare diff.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from autoforge.formatters import ConventionalCommit
from autoforge.log import get_logger
from autoforge.sanitize import sanitize_output
from autoforge.scope import (
    ScopeConfig,
    ScopeResult,
    infer_scope,
    load_scope_config_from_dict,
    scope_config_to_dict,
)
from autoforge.signals import (
    DiffContext,
    RankingConfig,
    Signal,
    analyze_signals,
    load_ranking_config_from_dict,
    parse_diff_context,
    ranking_config_to_dict,
)
from autoforge.styles import (
    EMPTY_DIFF_BRANCH,
    EMPTY_DIFF_COMMIT,
    BranchConfig,
    DescriptionConfig,
    branch_config_to_dict,
    describe,
    description_config_to_dict,
    generate_smart_branch_name,
    infer_commit_type,
    load_branch_config_from_dict,
    load_description_config_from_dict,
)

logger = get_logger(__name__)

_DIFF_MARKER = re.compile(r"Diff:\s*([\s\S]*)$")
_BRANCH_REQUEST = re.compile(r"branch name", re.IGNORECASE)


class LabelMode(Enum):
    """Output grammars the engine can render."""

    COMMIT = "commit"
    BRANCH = "branch"


@dataclass
class EngineConfig:
    """All tunables of the engine, grouped by component."""

    scope: ScopeConfig = field(default_factory=ScopeConfig)
    branch: BranchConfig = field(default_factory=BranchConfig)
    description: DescriptionConfig = field(default_factory=DescriptionConfig)
    ranking: RankingConfig = field(default_factory=RankingConfig)


@dataclass
class DiffAnalysis:
    """Everything the engine derived from one diff."""

    context: DiffContext
    signals: list[Signal]
    commit_type: str
    scope: ScopeResult


def load_engine_config_from_dict(config_dict: dict) -> EngineConfig:
    """Load EngineConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with the scope, branch, description and
            ranking sections.

    Returns:
        EngineConfig instance.
    """
    return EngineConfig(
        scope=load_scope_config_from_dict(config_dict),
        branch=load_branch_config_from_dict(config_dict),
        description=load_description_config_from_dict(config_dict),
        ranking=load_ranking_config_from_dict(config_dict),
    )


def engine_config_to_dict(config: EngineConfig) -> dict:
    """Convert EngineConfig to a dictionary for saving."""
    result = {}
    result.update(scope_config_to_dict(config.scope))
    result.update(branch_config_to_dict(config.branch))
    result.update(description_config_to_dict(config.description))
    result.update(ranking_config_to_dict(config.ranking))
    return result


def detect_mode(instructions: str) -> LabelMode:
    """Pick the output grammar requested by the instruction text.

    Args:
        instructions: Text surrounding the diff.

    Returns:
        BRANCH if a branch name is requested, COMMIT otherwise.
    """
    if _BRANCH_REQUEST.search(instructions or ""):
        return LabelMode.BRANCH
    # Commit is also the default for ambiguous requests
    return LabelMode.COMMIT


def split_prompt(prompt: str) -> tuple[str, str]:
    """Split a prompt into its instruction text and its diff.

    Without a "Diff:" marker the whole prompt serves as both.
    """
    if not prompt:
        return "", ""
    match = _DIFF_MARKER.search(prompt)
    if match:
        return prompt[: match.start()], match.group(1).strip()
    return prompt, prompt.strip()


def extract_diff(prompt: str) -> str:
    """Return the diff following a "Diff:" marker, or the whole prompt."""
    return split_prompt(prompt)[1]


def analyze_diff(diff: str, config: EngineConfig | None = None) -> DiffAnalysis:
    """Run the full pipeline up to type and scope inference.

    Args:
        diff: Raw diff text.
        config: Engine configuration.

    Returns:
        The DiffAnalysis.
    """
    if config is None:
        config = EngineConfig()

    ctx = parse_diff_context(diff)
    signals = analyze_signals(ctx, config.ranking)
    files = list(ctx.file_names)
    commit_type = infer_commit_type(signals, files)
    scope = infer_scope(files, signals, config.scope)

    logger.debug(
        "Inferred type=%s scope=%s (%s) from %d file(s)",
        commit_type,
        scope.scope,
        scope.strategy_used.value,
        len(files),
    )
    return DiffAnalysis(context=ctx, signals=signals, commit_type=commit_type, scope=scope)


def generate_commit_message(diff: str, config: EngineConfig | None = None) -> str:
    """Generate a conventional commit header for a diff.

    Args:
        diff: Raw diff text.
        config: Engine configuration.

    Returns:
        "type(scope): description", or "chore: empty diff" for an empty diff.
    """
    if not diff or not diff.strip():
        return EMPTY_DIFF_COMMIT

    if config is None:
        config = EngineConfig()

    analysis = analyze_diff(diff, config)
    commit = ConventionalCommit(
        type=analysis.commit_type,
        scope=analysis.scope.scope,
        description=describe(analysis.context, analysis.signals, config.description),
    )
    return commit.render()


def generate_branch_name(diff: str, config: EngineConfig | None = None) -> str:
    """Generate a branch name for a diff.

    Args:
        diff: Raw diff text.
        config: Engine configuration.

    Returns:
        "type/scope-words", or "chore/empty-diff" for an empty diff.
    """
    if not diff or not diff.strip():
        return EMPTY_DIFF_BRANCH

    if config is None:
        config = EngineConfig()

    analysis = analyze_diff(diff, config)
    return generate_smart_branch_name(
        analysis.signals,
        analysis.scope.scope,
        analysis.commit_type,
        config.branch,
    )


def generate_label(diff: str, mode: LabelMode, config: EngineConfig | None = None) -> str:
    """Generate the label for ``mode``."""
    if mode == LabelMode.BRANCH:
        return generate_branch_name(diff, config)
    return generate_commit_message(diff, config)


def complete_prompt(prompt: str, config: EngineConfig | None = None) -> str:
    """Answer a label request offline.

    The requested grammar is read from the instruction text and the diff
    from the text after "Diff:".

    Args:
        prompt: Instructions followed by the diff.
        config: Engine configuration.

    Returns:
        The sanitized commit message or branch name.
    """
    instructions, diff = split_prompt(prompt)
    mode = detect_mode(instructions)
    return sanitize_output(generate_label(diff, mode, config))
