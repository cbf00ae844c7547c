"""Branch name generation.

Branch names are built straight from the ranked signals, never from the
commit description: the description keeps camelCase identifiers,
conjunctions and punctuation that do not belong in a git ref.

    feat/cart-add-cart-calculate-total
    fix/auth-add-error
    refactor/booking-refactor-async-await
"""

import re

from autoforge.signals.models import Signal
from autoforge.styles.constants import VERB_TO_BRANCH_WORD
from autoforge.styles.models import BranchConfig


_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SUBJECT_SEPARATORS = re.compile(r"[\s/\-_→]+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def split_identifier(name: str) -> str:
    """Split camelCase and PascalCase identifiers into hyphenated words.

    addToCart -> add-to-cart
    ProductPage -> product-page
    HTMLParser -> html-parser
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1-\2", name)
    name = _CAMEL_BOUNDARY.sub(r"\1-\2", name)
    return name.lower()


def subject_to_slug_words(subject: str, stop_words: set[str]) -> list[str]:
    """Convert a signal subject into branch slug words.

    "addToCart" -> ["add", "cart"]
    "promise chains to async/await" -> ["async", "await"]

    Args:
        subject: A signal subject.
        stop_words: Words to drop.

    Returns:
        Lowercase alphanumeric words longer than one character.
    """
    words = []
    for part in _SUBJECT_SEPARATORS.split(subject):
        for word in split_identifier(part).split("-"):
            word = _NON_ALNUM.sub("", word.lower())
            if len(word) > 1 and word not in stop_words:
                words.append(word)
    return words


def signal_to_slug_words(signal: Signal, scope: str, config: BranchConfig) -> list[str]:
    """Convert one signal into its verb word followed by subject words.

    A subject whose first word repeats the scope loses that word:
    scope "product" and subject "ProductPage" give ["page"].
    """
    words = [VERB_TO_BRANCH_WORD[signal.verb]]
    for subject in signal.subjects[: config.max_subjects]:
        subject_words = subject_to_slug_words(subject, config.stop_words)
        if scope and subject_words and subject_words[0] == scope:
            subject_words = subject_words[1:]
        words.extend(subject_words)
    return words


def deduplicate_words(words: list[str]) -> list[str]:
    """Remove repeated words, keeping the first occurrence."""
    return list(dict.fromkeys(words))


def assemble_slug(words: list[str], config: BranchConfig | None = None) -> str:
    """Join words with hyphens and trim to the maximum slug length.

    The slug is cut at the last hyphen inside the limit so no word is split,
    unless that hyphen is too close to the start, in which case it is
    hard-cut at the limit.
    """
    if config is None:
        config = BranchConfig()

    full = "-".join(words)
    if len(full) <= config.max_slug_length:
        return full

    trimmed = full[: config.max_slug_length]
    last_hyphen = trimmed.rfind("-")
    return trimmed[:last_hyphen] if last_hyphen > config.min_cut_index else trimmed


def generate_smart_branch_name(
    signals: list[Signal],
    scope: str,
    commit_type: str,
    config: BranchConfig | None = None,
) -> str:
    """Generate a git-safe branch name from ranked signals.

    Args:
        signals: Ranked signals.
        scope: Inferred scope (e.g. "cart", "auth").
        commit_type: Conventional commit type (e.g. "feat", "fix").
        config: Branch configuration.

    Returns:
        The branch name, e.g. "feat/cart-add-cart-calculate-total".
    """
    if config is None:
        config = BranchConfig()

    if not signals:
        return f"{commit_type}/{scope}-update"

    words = []
    for signal in signals[: config.max_signals]:
        words.extend(signal_to_slug_words(signal, scope, config))

    slug = assemble_slug([scope] + deduplicate_words(words), config)
    return f"{commit_type}/{slug}"
