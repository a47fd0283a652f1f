"""Utility modules for slug-studio."""

from slug_studio.utils.issues import SlugIssue, SlugIssueType, diagnose_slug
from slug_studio.utils.slugs import generate_slug, normalize_slug, validate_slug
from slug_studio.utils.urls import document_path, exit_preview_url, preview_url
from slug_studio.utils.validator import SlugValidator, ValidationResult

__all__ = [
    "SlugIssue",
    "SlugIssueType",
    "SlugValidator",
    "ValidationResult",
    "diagnose_slug",
    "document_path",
    "exit_preview_url",
    "generate_slug",
    "normalize_slug",
    "preview_url",
    "validate_slug",
]
