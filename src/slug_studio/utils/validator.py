"""Slug validation utility for hand-edited slugs."""

from collections.abc import Iterable
from dataclasses import dataclass

from slug_studio.models import DEFAULT_MAX_LENGTH
from slug_studio.utils.issues import SlugIssue, diagnose_slug


@dataclass
class ValidationResult:
    """Result of slug validation."""

    success: bool
    message: str


class SlugValidator:
    """Validates slugs for shape, length and uniqueness."""

    def __init__(
        self,
        existing: Iterable[str] = (),
        max_length: int | None = DEFAULT_MAX_LENGTH,
    ) -> None:
        """Initialize the validator.

        Args:
            existing: Slugs already taken by other documents.
            max_length: Maximum slug length, or None for no limit.
        """
        self._existing = frozenset(existing)
        self.max_length = max_length

    @property
    def existing(self) -> frozenset[str]:
        """Slugs treated as taken."""
        return self._existing

    def issues(self, slug: str) -> list[SlugIssue]:
        """Return every problem with the slug.

        Args:
            slug: The slug to check.

        Returns:
            List of issues, empty when the slug is usable.
        """
        return diagnose_slug(slug, existing=self._existing, max_length=self.max_length)

    def validate(self, slug: str) -> ValidationResult:
        """Validate slug.

        Args:
            slug: The slug string to validate.

        Returns:
            ValidationResult with success status and message.
        """
        if not slug or not slug.strip():
            return ValidationResult(success=False, message="Slug cannot be empty")

        issues = self.issues(slug)
        if issues:
            return ValidationResult(success=False, message=issues[0].message)

        return ValidationResult(success=True, message="Valid slug")
