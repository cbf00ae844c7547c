"""Diff redaction and output cleanup.

Contains:
- sanitize_diff: Redact sensitive files and secret values before analysis
- is_empty_diff: True when nothing but redacted files remains
- sanitize_output: Strip quotes and backticks from a generated label
"""

import re
from dataclasses import dataclass


REDACTED_FILE_MARKER = "[REDACTED - sensitive file omitted]"
REDACTED_VALUE = "=[REDACTED]"

SENSITIVE_FILE_PATTERNS = [
    re.compile(r"\.env(\.\w+)?$"),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r".*credential.*", re.IGNORECASE),
    re.compile(r".*private.*", re.IGNORECASE),
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r"\.pem$"),
    re.compile(r"\.key$"),
    re.compile(r"\.p12$"),
    re.compile(r"\.pfx$"),
    re.compile(r"\.cer$"),
    re.compile(r"\.crt$"),
    re.compile(r"id_rsa"),
    re.compile(r"id_ed25519"),
    re.compile(r"\.npmrc$"),
    re.compile(r"\.netrc$"),
    re.compile(r".*keystore.*", re.IGNORECASE),
]

SENSITIVE_VALUE_PATTERNS = [
    # Generic key=value secrets
    re.compile(
        r"^[+-]\s*.*(api_key|apikey|api_token|access_token|secret|password|passwd|pwd|"
        r"private_key|auth_token|bearer|client_secret)\s*=\s*.+$",
        re.IGNORECASE,
    ),
    # Bearer tokens
    re.compile(r"^[+-]\s*.*bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    # AWS access keys
    re.compile(r"^[+-]\s*.*(AKIA[0-9A-Z]{16}).*", re.IGNORECASE),
    # Long hex/base64 values
    re.compile(r"^[+-]\s*.*=\s*[\"']?[A-Za-z0-9._\-+/=]{32,}[\"']?.*$", re.IGNORECASE),
]

_FILE_BLOCK_SPLIT = re.compile(r"(?=diff --git )")
_BLOCK_HEADER = re.compile(r"diff --git a/(.+?) b/(.+?)(?:\n|$)")
_ASSIGNED_VALUE = re.compile(r"=\s*[\"']?.+[\"']?$")


@dataclass
class SanitizeResult:
    """Result of diff redaction."""

    sanitized: str
    sensitive_file_detected: bool


def is_sensitive_file(path: str) -> bool:
    """Check whether a path names a file whose content must not be analyzed."""
    return any(pattern.search(path) for pattern in SENSITIVE_FILE_PATTERNS)


def has_sensitive_value(line: str) -> bool:
    """Check whether a changed line carries a secret value."""
    return any(pattern.search(line) for pattern in SENSITIVE_VALUE_PATTERNS)


def _split_blocks(diff: str) -> list[str]:
    return [block for block in _FILE_BLOCK_SPLIT.split(diff) if block.strip()]


def sanitize_diff(diff: str) -> SanitizeResult:
    """Redact sensitive files and secret values from a diff.

    Args:
        diff: Raw diff text.

    Returns:
        SanitizeResult with the redacted diff and whether anything was hidden.
    """
    detected = False
    blocks = []

    for block in _split_blocks(diff):
        header = _BLOCK_HEADER.search(block)
        if not header:
            blocks.append(block)
            continue

        path = header.group(2)
        if is_sensitive_file(path):
            detected = True
            blocks.append(f"diff --git a/{path} b/{path}\n{REDACTED_FILE_MARKER}\n")
            continue

        lines = []
        for line in block.split("\n"):
            if has_sensitive_value(line):
                detected = True
                line = _ASSIGNED_VALUE.sub(REDACTED_VALUE, line)
            lines.append(line)
        blocks.append("\n".join(lines))

    return SanitizeResult(sanitized="".join(blocks), sensitive_file_detected=detected)


def is_empty_diff(diff: str) -> bool:
    """Return True when the diff holds no analyzable file blocks.

    Args:
        diff: A diff, usually already passed through sanitize_diff.

    Returns:
        True if there are no blocks or every block is a redacted file.
    """
    return all(REDACTED_FILE_MARKER in block for block in _split_blocks(diff))


def sanitize_output(text: str) -> str:
    """Remove backticks and quotes from a generated label."""
    return re.sub(r"[\"']", "", re.sub(r"`+", "", text)).strip()
