"""Label styles for autoforge.

Turns ranked signals into the two output grammars:
- commit messages: type(scope): description
- branch names: type/scope-word-word

This package provides modular style handling with:
- constants: CONVENTIONAL_TYPES, VERB_TO_BRANCH_WORD, stop words, fallbacks
- models: BranchConfig, DescriptionConfig
- renderers: Description synthesis and branch slug generation
- inference: TYPE_RULES, infer_commit_type
- config: load_*_config_from_dict, *_config_to_dict
"""

# Constants
from autoforge.styles.constants import (
    CONVENTIONAL_TYPES,
    DEFAULT_BRANCH_STOP_WORDS,
    DEFAULT_COMMIT_TYPE,
    EMPTY_DIFF_BRANCH,
    EMPTY_DIFF_COMMIT,
    NO_CHANGES_DESCRIPTION,
    VERB_TO_BRANCH_WORD,
)

# Models
from autoforge.styles.models import (
    BranchConfig,
    DescriptionConfig,
)

# Renderers
from autoforge.styles.renderers import (
    assemble_slug,
    describe,
    fallback_description,
    generate_smart_branch_name,
    generate_smart_description,
    join_clauses,
    join_with_and,
    split_identifier,
    subject_to_slug_words,
    synthesize,
)

# Inference utilities
from autoforge.styles.inference import (
    TYPE_RULES,
    TypeRule,
    infer_commit_type,
    infer_type_from_files,
    match_type_rule,
)

# Configuration utilities
from autoforge.styles.config import (
    branch_config_to_dict,
    description_config_to_dict,
    load_branch_config_from_dict,
    load_description_config_from_dict,
)


__all__ = [
    # Constants
    "CONVENTIONAL_TYPES",
    "DEFAULT_BRANCH_STOP_WORDS",
    "DEFAULT_COMMIT_TYPE",
    "EMPTY_DIFF_BRANCH",
    "EMPTY_DIFF_COMMIT",
    "NO_CHANGES_DESCRIPTION",
    "VERB_TO_BRANCH_WORD",
    # Models
    "BranchConfig",
    "DescriptionConfig",
    # Renderers
    "assemble_slug",
    "describe",
    "fallback_description",
    "generate_smart_branch_name",
    "generate_smart_description",
    "join_clauses",
    "join_with_and",
    "split_identifier",
    "subject_to_slug_words",
    "synthesize",
    # Inference
    "TYPE_RULES",
    "TypeRule",
    "infer_commit_type",
    "infer_type_from_files",
    "match_type_rule",
    # Configuration
    "branch_config_to_dict",
    "description_config_to_dict",
    "load_branch_config_from_dict",
    "load_description_config_from_dict",
]
