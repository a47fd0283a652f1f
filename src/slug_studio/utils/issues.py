"""Slug diagnostics.

This module classifies what is wrong with a slug that fails validation
and formats user-friendly messages with a suggested repair.
"""

from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from slug_studio.utils.slugs import normalize_slug, validate_slug


class SlugIssueType(Enum):
    """Types of slug problems."""

    EMPTY = "empty"
    UPPERCASE = "uppercase"
    UNDERSCORE = "underscore"
    INVALID_CHARACTER = "invalid_character"
    LEADING_HYPHEN = "leading_hyphen"
    TRAILING_HYPHEN = "trailing_hyphen"
    DOUBLE_HYPHEN = "double_hyphen"
    TOO_LONG = "too_long"
    DUPLICATE = "duplicate"


@dataclass
class SlugIssue:
    """Structured slug problem with type and user-friendly message."""

    issue_type: SlugIssueType
    message: str
    details: str | None = None
    suggestion: str | None = None

    def format_message(self) -> str:
        """Format the issue as a user-friendly message.

        Returns:
            Formatted message with details and suggestions
        """
        parts = [self.message]

        if self.details:
            parts.append(f"Details: {self.details}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


_INVALID_CHARACTER = re.compile(r"[^a-zA-Z0-9_-]")


def _repair_suggestion(slug: str) -> str | None:
    repaired = normalize_slug(slug)
    if not repaired:
        return None
    return f"Use '{repaired}' instead."


def detect_empty_slug() -> SlugIssue:
    """Create issue for a missing slug.

    Returns:
        SlugIssue asking the editor to generate one
    """
    return SlugIssue(
        issue_type=SlugIssueType.EMPTY,
        message="Slug cannot be empty.",
        suggestion="Press generate to build the slug from the title.",
    )


def detect_uppercase(slug: str) -> SlugIssue:
    """Create issue for uppercase letters.

    Args:
        slug: The offending slug

    Returns:
        SlugIssue listing the uppercase characters
    """
    letters = sorted({char for char in slug if char.isupper()})
    return SlugIssue(
        issue_type=SlugIssueType.UPPERCASE,
        message="Slug must be lowercase.",
        details=f"Uppercase characters: {' '.join(letters)}",
        suggestion=_repair_suggestion(slug),
    )


def detect_underscore(slug: str) -> SlugIssue:
    """Create issue for underscores, which generated slugs may keep."""
    return SlugIssue(
        issue_type=SlugIssueType.UNDERSCORE,
        message="Slug cannot contain underscores.",
        suggestion=_repair_suggestion(slug),
    )


def detect_invalid_characters(slug: str) -> SlugIssue:
    """Create issue for characters that are not letters, digits or hyphens.

    Args:
        slug: The offending slug

    Returns:
        SlugIssue listing the characters, in order of first appearance
    """
    found = list(dict.fromkeys(_INVALID_CHARACTER.findall(slug)))
    return SlugIssue(
        issue_type=SlugIssueType.INVALID_CHARACTER,
        message="Slug may only contain letters a-z, digits and hyphens.",
        details=f"Invalid characters: {' '.join(repr(char) for char in found)}",
        suggestion=_repair_suggestion(slug),
    )


def detect_leading_hyphen(slug: str) -> SlugIssue:
    return SlugIssue(
        issue_type=SlugIssueType.LEADING_HYPHEN,
        message="Slug cannot start with a hyphen.",
        suggestion=_repair_suggestion(slug),
    )


def detect_trailing_hyphen(slug: str) -> SlugIssue:
    return SlugIssue(
        issue_type=SlugIssueType.TRAILING_HYPHEN,
        message="Slug cannot end with a hyphen.",
        suggestion=_repair_suggestion(slug),
    )


def detect_double_hyphen(slug: str) -> SlugIssue:
    return SlugIssue(
        issue_type=SlugIssueType.DOUBLE_HYPHEN,
        message="Slug cannot contain consecutive hyphens.",
        suggestion=_repair_suggestion(slug),
    )


def detect_too_long(slug: str, max_length: int) -> SlugIssue:
    """Create issue for a slug longer than the field allows.

    Args:
        slug: The offending slug
        max_length: Maximum number of characters allowed

    Returns:
        SlugIssue with the actual length
    """
    return SlugIssue(
        issue_type=SlugIssueType.TOO_LONG,
        message=f"Slug is longer than {max_length} characters.",
        details=f"Length: {len(slug)}",
        suggestion="Shorten the title or edit the slug by hand.",
    )


def detect_duplicate(slug: str) -> SlugIssue:
    """Create issue for a slug that is already in use."""
    return SlugIssue(
        issue_type=SlugIssueType.DUPLICATE,
        message=f'Slug "{slug}" is already in use. Please choose a different one.',
    )


def diagnose_slug(
    slug: str,
    existing: Collection[str] = (),
    max_length: int | None = None,
) -> list[SlugIssue]:
    """Detect every problem with a slug.

    Args:
        slug: The slug to check
        existing: Slugs already taken by other documents
        max_length: Optional maximum length

    Returns:
        Issues in a fixed order; empty if the slug is usable
    """
    if not slug:
        return [detect_empty_slug()]

    issues: list[SlugIssue] = []

    if not validate_slug(slug):
        if any(char.isupper() for char in slug):
            issues.append(detect_uppercase(slug))
        if "_" in slug:
            issues.append(detect_underscore(slug))
        if _INVALID_CHARACTER.search(slug):
            issues.append(detect_invalid_characters(slug))
        if slug.startswith("-"):
            issues.append(detect_leading_hyphen(slug))
        if slug.endswith("-"):
            issues.append(detect_trailing_hyphen(slug))
        if "--" in slug:
            issues.append(detect_double_hyphen(slug))

    if max_length is not None and len(slug) > max_length:
        issues.append(detect_too_long(slug, max_length))

    if slug in existing:
        issues.append(detect_duplicate(slug))

    return issues


def format_issues_for_ui(issues: list[SlugIssue]) -> str:
    """Format slug issues for display in the UI.

    Args:
        issues: The issues to format

    Returns:
        User-friendly message, one block per issue
    """
    return "\n\n".join(issue.format_message() for issue in issues)
