"""Slug utilities for deriving URL path segments from document titles."""

import re

# Norwegian letters get a fixed ASCII spelling; nothing else is transliterated.
TRANSLITERATIONS = {
    "æ": "ae",
    "ø": "o",
    "å": "a",
}

SLUG_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")

# Character-class body for whitespace as JavaScript regular expressions define it
_WHITESPACE_CHARS = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_DISALLOWED_TITLE_CHARS = re.compile(f"[^a-z0-9_{_WHITESPACE_CHARS}-]")
_WHITESPACE_RUN = re.compile(f"[{_WHITESPACE_CHARS}]+")
_HYPHEN_RUN = re.compile(r"-{2,}")
_NON_SLUG_CHAR = re.compile(r"[^a-z0-9-]")


def generate_slug(text: str) -> str:
    """Derive a slug from a title.

    - Converts to lowercase
    - Transliterates æ, ø and å
    - Removes everything except ASCII letters, digits, underscores,
      whitespace and hyphens
    - Replaces whitespace runs with a hyphen
    - Collapses repeated hyphens and strips them from both ends

    Underscores are kept, so the result is not always accepted by
    :func:`validate_slug`.

    Args:
        text: The title to derive the slug from.

    Returns:
        The slug, or an empty string if nothing usable remains.
    """
    # Convert to lowercase
    result = text.lower()

    for letter, replacement in TRANSLITERATIONS.items():
        result = result.replace(letter, replacement)

    # Remove special characters
    result = _DISALLOWED_TITLE_CHARS.sub("", result)

    # Replace whitespace with hyphens
    result = _WHITESPACE_RUN.sub("-", result)

    # Collapse multiple consecutive hyphens into one
    result = _HYPHEN_RUN.sub("-", result)

    # Strip leading and trailing hyphens
    return result.strip("-")


def validate_slug(slug: str) -> bool:
    """Return True if slug is lowercase ASCII words joined by single hyphens."""
    return SLUG_PATTERN.fullmatch(slug) is not None


def normalize_slug(slug: str) -> str:
    """Repair an existing slug.

    Unlike :func:`generate_slug`, every character outside ``[a-z0-9-]``
    (underscores and accented letters included) becomes a hyphen.

    Args:
        slug: The slug to repair, typically one that failed validation.

    Returns:
        A valid slug, or an empty string.
    """
    result = slug.lower()

    # Replace invalid characters with hyphens
    result = _NON_SLUG_CHAR.sub("-", result)

    result = _HYPHEN_RUN.sub("-", result)

    return result.strip("-")
