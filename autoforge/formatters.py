"""Commit message formatting and rendering."""

from typing import Optional

from pydantic import BaseModel, field_validator

from autoforge.styles.constants import CONVENTIONAL_TYPES


class ConventionalCommit(BaseModel):
    """Pydantic model for a conventional commit header.

    Attributes:
        type: Conventional commit type (feat, fix, refactor, ...).
        scope: Area of code affected, or None for a scopeless header.
        description: Lowercase summary of the change.
        breaking: Whether to flag the change with "!".
    """

    type: str
    scope: Optional[str] = None
    description: str
    breaking: bool = False

    @field_validator("type")
    @classmethod
    def type_must_be_conventional(cls, v: str) -> str:
        """Ensure type is one of the supported conventional types."""
        v = v.strip().lower()
        if v not in CONVENTIONAL_TYPES:
            raise ValueError(f"Unsupported commit type: {v}")
        return v

    @field_validator("scope")
    @classmethod
    def normalize_scope(cls, v: Optional[str]) -> Optional[str]:
        """Lowercase the scope and treat blank scopes as missing."""
        if v is None or not v.strip():
            return None
        return v.strip().lower()

    @field_validator("description")
    @classmethod
    def description_must_not_be_empty(cls, v: str) -> str:
        """Ensure description is not empty."""
        if not v or not v.strip():
            raise ValueError("Description cannot be empty")
        return v.strip()

    def render(self) -> str:
        """Render the header as ``type(scope)!: description``."""
        scope = f"({self.scope})" if self.scope else ""
        bang = "!" if self.breaking else ""
        return f"{self.type}{scope}{bang}: {sanitize_description(self.description)}"


def sanitize_description(description: str, max_length: Optional[int] = None) -> str:
    """Make a description fit a single commit header line.

    Takes the first line, lowercases its first character and drops trailing
    periods. With ``max_length`` the description is cut at the last space
    that fits, never inside a word.

    Args:
        description: The raw description.
        max_length: Maximum allowed length, or None for no limit.

    Returns:
        A single-line description.
    """
    description = description.strip().split("\n")[0].strip().rstrip(".").rstrip()

    if description:
        description = description[0].lower() + description[1:]

    if max_length is not None and len(description) > max_length:
        cut = description.rfind(" ", 0, max_length + 1)
        # A single over-long word is kept whole
        if cut > 0:
            description = description[:cut].rstrip(" ,;").rstrip(".")

    return description
