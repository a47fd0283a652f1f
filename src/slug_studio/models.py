"""Data models for slug-studio."""

import os
from dataclasses import dataclass
from enum import Enum


DEFAULT_SITE_URL = "http://localhost:4321"

# Matches the maxLength option on the CMS slug fields
DEFAULT_MAX_LENGTH = 96


class Language(Enum):
    """Language version of a document."""

    NO = "no"
    EN = "en"

    @property
    def url_prefix(self) -> str:
        """Path prefix for this language; Norwegian is served from the root."""
        return "" if self is Language.NO else f"/{self.value}"


class DocumentType(Enum):
    """CMS document types that have their own URLs."""

    PAGE = "page"
    ARTIST = "artist"
    EVENT = "event"

    @property
    def base_path(self) -> str:
        """Listing path that detail pages of this type live under."""
        return {
            DocumentType.PAGE: "",
            DocumentType.ARTIST: "/artists",
            DocumentType.EVENT: "/program",
        }[self]


class SlugStatus(Enum):
    """State of the slug being edited."""

    EMPTY = "empty"
    VALID = "valid"
    INVALID = "invalid"


@dataclass
class Config:
    """Application configuration."""

    site_url: str
    language: Language
    document_type: DocumentType
    auto_generate: bool  # Slug follows the title until edited by hand
    max_length: int = DEFAULT_MAX_LENGTH

    @classmethod
    def default(cls) -> "Config":
        """Return default configuration."""
        return cls(
            site_url=os.environ.get("SITE_URL") or DEFAULT_SITE_URL,
            language=Language.NO,
            document_type=DocumentType.PAGE,
            auto_generate=True,
            max_length=DEFAULT_MAX_LENGTH,
        )
