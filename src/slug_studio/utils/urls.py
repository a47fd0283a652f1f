"""URL helpers for documents and draft-mode preview links."""

from urllib.parse import quote

from slug_studio.models import DocumentType, Language

DRAFT_MODE_ENABLE_PATH = "/api/draft-mode/enable"
DRAFT_MODE_DISABLE_PATH = "/api/draft-mode/disable"


def document_path(
    slug: str,
    document_type: DocumentType = DocumentType.PAGE,
    language: Language = Language.NO,
) -> str:
    """Build the frontend path for a document.

    Norwegian is the default language and has no prefix; English paths
    start with ``/en``. Without a slug the document type's listing path
    is returned.

    Args:
        slug: The document slug.
        document_type: Type of the document, which decides the base path.
        language: Language version to link to.

    Returns:
        An absolute path such as ``/en/artists/some-artist``.
    """
    base_path = document_type.base_path
    if not slug:
        return base_path or "/"

    prefix = language.url_prefix
    return f"{prefix}{base_path}/{slug}"


def absolute_url(site_url: str, path: str) -> str:
    """Join the site URL and a path."""
    return f"{site_url.rstrip('/')}/{path.lstrip('/')}"


def preview_url(site_url: str, path: str) -> str:
    """Build a link that turns on draft mode and redirects to path."""
    return f"{site_url.rstrip('/')}{DRAFT_MODE_ENABLE_PATH}?url={quote(path, safe='/')}"


def exit_preview_url(site_url: str) -> str:
    """Build a link that turns off draft mode."""
    return f"{site_url.rstrip('/')}{DRAFT_MODE_DISABLE_PATH}"
