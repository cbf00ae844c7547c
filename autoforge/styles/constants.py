"""Constants for autoforge styles module.

Contains:
- CONVENTIONAL_TYPES: Commit types the engine can produce
- VERB_TO_BRANCH_WORD: Short branch words for each change verb
- DEFAULT_BRANCH_STOP_WORDS: Words dropped from branch slugs
- Fallback strings used when no signal is detected
"""

from autoforge.signals.models import ChangeVerb


# Commit types the engine can produce
CONVENTIONAL_TYPES = [
    "feat",
    "fix",
    "refactor",
    "perf",
    "test",
    "docs",
    "style",
    "chore",
    "build",
]

DEFAULT_COMMIT_TYPE = "chore"

# Branch names use shorter imperative words than commit messages
VERB_TO_BRANCH_WORD = {
    ChangeVerb.IMPLEMENT: "add",
    ChangeVerb.CREATE: "add",
    ChangeVerb.ADD: "add",
    ChangeVerb.REMOVE: "remove",
    ChangeVerb.REFACTOR: "refactor",
    ChangeVerb.UPDATE: "update",
    ChangeVerb.RENAME: "rename",
    ChangeVerb.OPTIMIZE: "optimize",
}

DEFAULT_BRANCH_STOP_WORDS = {
    # Conjunctions, articles, prepositions
    "and",
    "or",
    "the",
    "a",
    "an",
    "to",
    "of",
    "for",
    "in",
    "on",
    "with",
    "from",
    "by",
    "is",
    "are",
    "was",
    "be",
    "as",
    "at",
    # Generic code nouns
    "function",
    "functions",
    "component",
    "components",
    "class",
    "classes",
    "hook",
    "hooks",
    "handler",
    "handlers",
    "module",
    "modules",
    "service",
    "services",
    "helper",
    "helpers",
    "util",
    "utils",
    "new",
    "existing",
    "current",
    "old",
    # Signal noise
    "promise",
    "chains",
    "chain",
    "handling",
    "logic",
    "based",
}

# Leaves room for the "type/" prefix within ~50 characters
DEFAULT_MAX_SLUG_LENGTH = 45
DEFAULT_BRANCH_SIGNALS = 2
DEFAULT_BRANCH_SUBJECTS = 2
# A hyphen must sit past this index for the slug to be cut there
DEFAULT_MIN_CUT_INDEX = 10

# Line delta above which a mixed diff reads as a refactor
DEFAULT_REFACTOR_THRESHOLD = 20

NO_CHANGES_DESCRIPTION = "no changes detected"
EMPTY_DIFF_COMMIT = "chore: empty diff"
EMPTY_DIFF_BRANCH = "chore/empty-diff"
