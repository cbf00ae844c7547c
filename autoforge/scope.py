"""Scope inference for autoforge.

Provides deterministic scope inference from touched files to generate
commit scopes like feat(cart) and branch prefixes like feat/cart-...

The cascade stops at the first step that yields a scope:
- domain: Match the joined file paths against known business/technical domains
- path: First directory of the primary file that is not a noise directory
- filename: Stem of the primary file (unless it is "index")
- fallback: The configured fallback scope ("core")
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ScopeStrategy(Enum):
    """Steps of the scope inference cascade."""

    DOMAIN = "domain"
    PATH = "path"
    FILENAME = "filename"
    FALLBACK = "fallback"


# Ordered (pattern, scope) pairs tested against the joined lowercase paths
DEFAULT_DOMAINS = [
    (r"auth|login|logout|signin|signup|session|jwt|oauth|passport", "auth"),
    (r"cart|checkout|basket", "cart"),
    (r"user|profile|account|member", "user"),
    (r"product|catalog|inventory", "product"),
    (r"payment|billing|invoice|stripe|paypal|subscription", "payment"),
    (r"(^|[/ ])api/|routes?/|controllers?/|endpoints?/", "api"),
    (r"(^|[/ ._-])db([/ ._-]|$)|database|models?/|schema|migrations?/|prisma|entities/", "db"),
    (r"config|settings|(^|[/ ])\.env|tsconfig|webpack|vite\.|babel|eslint", "config"),
    (r"(^|[/ ])tests?/|__tests__/|\.test\.|\.spec\.", "test"),
    (r"components?/|pages?/|views?/|layouts?/|styles?/|\.css|\.scss", "ui"),
    (r"(^|[/ ])store/|redux|slices?/|reducers?/|zustand", "store"),
    (r"(^|[/ ])hooks?/", "hooks"),
    (r"(^|[/ ])utils?/|helpers?/", "utils"),
    (r"middlewares?/", "middleware"),
    (r"notif|mailer|emails?/|sms", "notify"),
    (r"search|elastic|algolia", "search"),
    (r"storage|uploads?/|bucket|(^|[/ ])s3", "storage"),
]

# Directories too generic to name a scope
DEFAULT_NOISE_DIRS = {
    "src",
    "lib",
    "app",
    "dist",
    "build",
    "packages",
    "modules",
    ".",
    "",
}

DEFAULT_FALLBACK_SCOPE = "core"

_SCOPE_CHARS = re.compile(r"[^a-z0-9-]")


@dataclass
class ScopeConfig:
    """Configuration for scope inference."""

    # Ordered (regex, scope) pairs; first match wins
    domains: list[tuple[str, str]] = field(default_factory=lambda: DEFAULT_DOMAINS.copy())

    # Directory names skipped when reading the primary path
    noise_dirs: set[str] = field(default_factory=lambda: DEFAULT_NOISE_DIRS.copy())

    fallback: str = DEFAULT_FALLBACK_SCOPE


@dataclass
class ScopeResult:
    """Result of scope inference."""

    scope: str
    strategy_used: ScopeStrategy
    reason: str  # Human-readable explanation


def normalize_path(path: str) -> str:
    """Normalize a file path for consistent processing.

    Args:
        path: The file path to normalize.

    Returns:
        Normalized path with forward slashes.
    """
    return path.replace("\\", "/").strip("/")


def clean_scope(value: str) -> str:
    """Lowercase a candidate scope and drop characters unsafe in a branch name."""
    return _SCOPE_CHARS.sub("", value.lower().replace("_", "-")).strip("-")


def is_docs_file(path: str) -> bool:
    """Check if a file is a documentation file.

    Args:
        path: The file path.

    Returns:
        True if the file is a documentation file.
    """
    normalized = normalize_path(path).lower()

    doc_extensions = {".md", ".rst", ".txt", ".adoc", ".asciidoc", ".mdx"}
    if any(normalized.endswith(ext) for ext in doc_extensions):
        return True

    doc_dirs = {"docs", "doc", "documentation", "wiki"}
    parts = normalized.split("/")
    return any(part in doc_dirs for part in parts)


def is_test_file(path: str) -> bool:
    """Check if a file is a test file.

    Args:
        path: The file path.

    Returns:
        True if the file is a test file.
    """
    normalized = normalize_path(path).lower()

    test_patterns = [
        "test_",
        "_test.",
        ".test.",
        "tests/",
        "test/",
        "spec/",
        "specs/",
        "__tests__/",
        ".spec.",
        "_spec.",
    ]
    return any(pattern in normalized for pattern in test_patterns)


def infer_scope_from_domains(
    files: list[str],
    domains: list[tuple[str, str]],
) -> Optional[ScopeResult]:
    """Infer scope from the domain keyword map.

    Args:
        files: Touched file paths.
        domains: Ordered (regex, scope) pairs.

    Returns:
        ScopeResult for the first matching domain, None otherwise.
    """
    if not files:
        return None

    joined = " ".join(normalize_path(f) for f in files).lower()

    for pattern, scope in domains:
        if re.search(pattern, joined):
            return ScopeResult(
                scope=scope,
                strategy_used=ScopeStrategy.DOMAIN,
                reason=f"Paths match the '{scope}' domain",
            )
    return None


def infer_scope_from_path(
    files: list[str],
    noise_dirs: set[str],
) -> Optional[ScopeResult]:
    """Infer scope from the first meaningful directory of the primary file.

    Args:
        files: Touched file paths; the first one is primary.
        noise_dirs: Directory names to skip.

    Returns:
        ScopeResult if a meaningful directory exists, None otherwise.
    """
    if not files:
        return None

    parts = normalize_path(files[0]).split("/")
    for segment in parts[:-1]:
        if segment.lower() in noise_dirs:
            continue
        scope = clean_scope(segment)
        if scope:
            return ScopeResult(
                scope=scope,
                strategy_used=ScopeStrategy.PATH,
                reason=f"Directory '{segment}' of {files[0]}",
            )
    return None


def infer_scope_from_filename(files: list[str]) -> Optional[ScopeResult]:
    """Infer scope from the primary file name without its extension.

    Args:
        files: Touched file paths; the first one is primary.

    Returns:
        ScopeResult unless the file is an index module or has no usable name.
    """
    if not files:
        return None

    name = normalize_path(files[0]).split("/")[-1]
    stem = name.rsplit(".", 1)[0] if "." in name.lstrip(".") else name
    if stem.lower() == "index":
        return None

    scope = clean_scope(stem)
    if not scope:
        return None

    return ScopeResult(
        scope=scope,
        strategy_used=ScopeStrategy.FILENAME,
        reason=f"File name of {files[0]}",
    )


def infer_scope(
    files: list[str],
    signals: Optional[list] = None,
    config: ScopeConfig | None = None,
) -> ScopeResult:
    """Infer scope from touched files.

    Args:
        files: Touched file paths.
        signals: Ranked signals. Accepted for signal-aware scoping, not used
            by the cascade.
        config: Scope inference configuration.

    Returns:
        ScopeResult whose scope is never empty.
    """
    if config is None:
        config = ScopeConfig()

    files = [f for f in files if f and f.strip()]

    result = (
        infer_scope_from_domains(files, config.domains)
        or infer_scope_from_path(files, config.noise_dirs)
        or infer_scope_from_filename(files)
    )
    if result:
        return result

    return ScopeResult(
        scope=clean_scope(config.fallback) or DEFAULT_FALLBACK_SCOPE,
        strategy_used=ScopeStrategy.FALLBACK,
        reason="No files to analyze" if not files else "Could not determine scope from file paths",
    )


def load_scope_config_from_dict(config_dict: dict) -> ScopeConfig:
    """Load ScopeConfig from a configuration dictionary.

    Invalid domain entries are skipped.

    Args:
        config_dict: Dictionary with scope configuration.

    Returns:
        ScopeConfig instance.
    """
    scope_section = config_dict.get("scope")
    if not isinstance(scope_section, dict):
        scope_section = {}

    domains_raw = scope_section.get("domains", None)
    if not isinstance(domains_raw, list):
        domains = DEFAULT_DOMAINS.copy()
    else:
        domains = []
        for entry in domains_raw:
            if not isinstance(entry, dict):
                continue
            pattern, scope = entry.get("pattern"), entry.get("scope")
            if not pattern or not scope:
                continue
            try:
                re.compile(pattern)
            except re.error:
                continue
            domains.append((str(pattern), str(scope)))

    noise_dirs = scope_section.get("noise_dirs", None)
    if not isinstance(noise_dirs, list):
        noise_dirs = DEFAULT_NOISE_DIRS.copy()
    else:
        noise_dirs = {str(d).lower() for d in noise_dirs}

    return ScopeConfig(
        domains=domains,
        noise_dirs=noise_dirs,
        fallback=str(scope_section.get("fallback") or DEFAULT_FALLBACK_SCOPE),
    )


def scope_config_to_dict(config: ScopeConfig) -> dict:
    """Convert ScopeConfig to a dictionary for saving.

    Args:
        config: ScopeConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "scope": {
            "domains": [{"pattern": pattern, "scope": scope} for pattern, scope in config.domains],
            "noise_dirs": sorted(config.noise_dirs),
            "fallback": config.fallback,
        }
    }
