"""Renderers for autoforge labels.

Contains:
- description: Prose commit descriptions synthesized from signals
- branch: Hyphenated, length-capped branch slugs built from signals
"""

from autoforge.styles.renderers.description import (
    dedupe_subjects,
    describe,
    fallback_description,
    generate_smart_description,
    join_clauses,
    join_with_and,
    synthesize,
)
from autoforge.styles.renderers.branch import (
    assemble_slug,
    deduplicate_words,
    generate_smart_branch_name,
    signal_to_slug_words,
    split_identifier,
    subject_to_slug_words,
)


__all__ = [
    # Description
    "dedupe_subjects",
    "describe",
    "fallback_description",
    "generate_smart_description",
    "join_clauses",
    "join_with_and",
    "synthesize",
    # Branch
    "assemble_slug",
    "deduplicate_words",
    "generate_smart_branch_name",
    "signal_to_slug_words",
    "split_identifier",
    "subject_to_slug_words",
]
