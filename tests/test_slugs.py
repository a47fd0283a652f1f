"""Tests for the slug normalizer.

Property 1: generate_slug output is a valid slug unless empty or containing underscores
Property 2: normalize_slug output is empty or a valid slug
Property 3: normalize_slug and generate_slug are idempotent
"""

import re

from hypothesis import given, settings
from hypothesis import strategies as st

from slug_studio.utils.slugs import generate_slug, normalize_slug, validate_slug


class TestGenerateSlugProperties:
    """Property-based tests for generate_slug."""

    @given(st.text())
    @settings(max_examples=100)
    def test_generate_slug_is_valid_without_underscores(self, text: str) -> None:
        """Non-empty output without underscores always validates."""
        slug = generate_slug(text)
        if slug and "_" not in slug:
            assert validate_slug(slug), f"generate_slug('{text}') = '{slug}' is not valid"

    @given(st.text())
    @settings(max_examples=100)
    def test_generate_slug_character_constraints(self, text: str) -> None:
        """Output contains only [a-z0-9_-], no whitespace and no edge hyphens."""
        slug = generate_slug(text)

        assert re.fullmatch(r"[a-z0-9_-]*", slug) is not None, (
            f"Invalid characters in generated slug: '{slug}' from input '{text}'"
        )
        assert re.search(r"\s", slug) is None
        assert "--" not in slug
        if slug:
            assert not slug.startswith("-")
            assert not slug.endswith("-")

    @given(st.text())
    @settings(max_examples=100)
    def test_generate_slug_idempotence(self, text: str) -> None:
        """generate_slug(generate_slug(x)) == generate_slug(x)"""
        once = generate_slug(text)
        twice = generate_slug(once)
        assert once == twice, f"Idempotence failed: '{once}' became '{twice}'"

    @given(st.text(alphabet="abc_ ", min_size=1).filter(lambda s: "_" in s.strip()))
    @settings(max_examples=50)
    def test_underscores_survive_generation(self, text: str) -> None:
        """Underscores are kept by generate_slug even though validate_slug rejects them."""
        slug = generate_slug(text)
        assert "_" in slug
        assert not validate_slug(slug)


class TestNormalizeSlugProperties:
    """Property-based tests for normalize_slug."""

    @given(st.text())
    @settings(max_examples=100)
    def test_normalize_slug_is_empty_or_valid(self, text: str) -> None:
        slug = normalize_slug(text)
        assert slug == "" or validate_slug(slug), (
            f"normalize_slug('{text}') = '{slug}' is not valid"
        )

    @given(st.text())
    @settings(max_examples=100)
    def test_normalize_slug_idempotence(self, text: str) -> None:
        once = normalize_slug(text)
        assert normalize_slug(once) == once

    @given(st.from_regex(r"[a-z0-9]+(-[a-z0-9]+)*", fullmatch=True))
    @settings(max_examples=100)
    def test_valid_slugs_are_fixed_points(self, slug: str) -> None:
        """Valid slugs pass through every operation unchanged."""
        assert validate_slug(slug)
        assert normalize_slug(slug) == slug
        assert generate_slug(slug) == slug


class TestGenerateSlug:
    """Concrete scenarios for generate_slug."""

    def test_norwegian_letters_are_transliterated(self) -> None:
        # é is not in the transliteration map, so it is dropped
        assert generate_slug("Ærlig Åpning på Østkant Café") == "aerlig-apning-pa-ostkant-caf"

    def test_whitespace_runs_collapse(self) -> None:
        assert generate_slug("  Multiple   Spaces  ") == "multiple-spaces"

    def test_existing_hyphens_are_kept(self) -> None:
        assert generate_slug("Already-Valid-Slug") == "already-valid-slug"

    def test_empty_input(self) -> None:
        assert generate_slug("") == ""

    def test_symbols_only(self) -> None:
        assert generate_slug("!@#$%^&*()") == ""

    def test_symbols_between_words(self) -> None:
        assert generate_slug("Rock & Roll -- Live!") == "rock-roll-live"

    def test_underscore_is_preserved(self) -> None:
        assert generate_slug("Hello_World") == "hello_world"

    def test_tabs_and_newlines(self) -> None:
        assert generate_slug("Line\tone\nline two") == "line-one-line-two"

    def test_separator_controls_are_removed(self) -> None:
        assert generate_slug("a\x1cb") == "ab"
        assert generate_slug("a\x1fb") == "ab"
        assert generate_slug("a\x85b") == "ab"

    def test_byte_order_mark_is_whitespace(self) -> None:
        assert generate_slug("a\ufeffb") == "a-b"

    def test_unicode_spaces(self) -> None:
        assert generate_slug("a\u00a0b\u3000c\u2009d") == "a-b-c-d"

    def test_other_accents_are_removed(self) -> None:
        assert generate_slug("Ñandú Über") == "and-ber"

    def test_digits(self) -> None:
        assert generate_slug("Festival 2025") == "festival-2025"


class TestValidateSlug:
    """Concrete scenarios for validate_slug."""

    def test_valid_slug(self) -> None:
        assert validate_slug("my-great-post") is True

    def test_single_segment(self) -> None:
        assert validate_slug("a") is True

    def test_uppercase(self) -> None:
        assert validate_slug("My-Great-Post") is False

    def test_double_hyphen(self) -> None:
        assert validate_slug("double--hyphen") is False

    def test_empty(self) -> None:
        assert validate_slug("") is False

    def test_edge_hyphens(self) -> None:
        assert validate_slug("-leading") is False
        assert validate_slug("trailing-") is False

    def test_underscore(self) -> None:
        assert validate_slug("hello_world") is False

    def test_accented_letter(self) -> None:
        assert validate_slug("café") is False

    def test_trailing_newline(self) -> None:
        assert validate_slug("slug\n") is False


class TestNormalizeSlug:
    """Concrete scenarios for normalize_slug."""

    def test_underscore_and_symbols_become_hyphens(self) -> None:
        assert normalize_slug("Hello_World!!") == "hello-world"

    def test_accented_letters_become_hyphens(self) -> None:
        assert normalize_slug("Østkant") == "stkant"
        assert normalize_slug("blåbær") == "bl-b-r"

    def test_edge_hyphens_are_stripped(self) -> None:
        assert normalize_slug("--a--b--") == "a-b"

    def test_empty(self) -> None:
        assert normalize_slug("") == ""

    def test_symbols_only(self) -> None:
        assert normalize_slug("***") == ""
