"""Tests for slug sanitization."""

import pydantic
import pytest

from cms_formatter.core.config import SlugConfig
from cms_formatter.core.slug import (
    SlugGenerator,
    decode_uri_component,
    encode_uri_component,
    prepare_slug,
    sanitize_filename,
    sanitize_slug,
)


class TestPrepareSlug:
    """Tests for prepare_slug."""

    def test_trims(self):
        """Test surrounding whitespace is removed."""
        assert prepare_slug(" slug ") == "slug"

    def test_lowercases(self):
        """Test the slug is lowercased."""
        assert prepare_slug("Slug") == "slug"

    def test_removes_single_quotes(self):
        """Test single quotes are dropped."""
        assert prepare_slug("sl'ug") == "slug"

    def test_replaces_periods(self):
        """Test periods become hyphens."""
        assert prepare_slug("sl.ug") == "sl-ug"

    def test_keeps_spaces_and_slashes(self):
        """Test other characters pass through."""
        assert prepare_slug("Post Title/Part 2") == "post title/part 2"

    @pytest.mark.parametrize(
        "value",
        [" Slug ", "sl'ug", "v1.2.3", "' quoted '", "Post Title", "", "..", "İstanbul"],
    )
    def test_idempotent(self, value):
        """Test preparing twice equals preparing once."""
        once = prepare_slug(value)
        assert prepare_slug(once) == once


class TestSanitizeSlug:
    """Tests for sanitize_slug."""

    def test_spaces_become_replacement(self):
        """Test spaces are replaced."""
        assert sanitize_slug("post title") == "post-title"

    def test_collapses_and_trims_replacement(self):
        """Test doubled and edge replacements are removed."""
        assert sanitize_slug("  what's -- new?  ") == "what-s-new"

    def test_keeps_unicode_by_default(self):
        """Test unicode encoding keeps non-ASCII letters."""
        assert sanitize_slug("café crème") == "café-crème"

    def test_ascii_encoding_drops_non_ascii(self):
        """Test ascii encoding replaces non-ASCII characters."""
        assert sanitize_slug("café", SlugConfig(encoding="ascii")) == "caf"

    def test_clean_accents(self):
        """Test diacritics are stripped before sanitizing."""
        config = SlugConfig(encoding="ascii", clean_accents=True)
        assert sanitize_slug("Café Crème", config) == "Cafe-Creme"

    def test_custom_replacement(self):
        """Test a custom replacement string."""
        assert sanitize_slug("a b/c", SlugConfig(sanitize_replacement="_")) == "a_b_c"

    def test_unsafe_replacement_rejected(self):
        """Test the replacement must itself be safe."""
        with pytest.raises(pydantic.ValidationError, match="itself unsafe"):
            SlugConfig(sanitize_replacement="/")

    def test_rejects_non_string(self):
        """Test non-string input fails loudly."""
        with pytest.raises(TypeError):
            sanitize_slug(42)  # type: ignore[arg-type]


class TestSanitizeFilename:
    """Tests for sanitize_filename."""

    def test_reserved_windows_name(self):
        """Test reserved device names are replaced."""
        assert sanitize_filename("con", "-") == "-"

    def test_trailing_dots(self):
        """Test trailing dots and spaces are replaced."""
        assert sanitize_filename("name. ", "-") == "name-"

    def test_truncates_to_255_bytes(self):
        """Test long names are truncated."""
        assert len(sanitize_filename("a" * 300).encode()) == 255


class TestUriComponent:
    """Tests for URI component encoding."""

    def test_encodes_slash_and_space(self):
        """Test slashes and spaces are percent-encoded."""
        assert encode_uri_component("sub_dir/post title") == "sub_dir%2Fpost%20title"

    def test_keeps_component_safe_characters(self):
        """Test the encodeURIComponent safe set is untouched."""
        assert encode_uri_component("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"

    def test_decodes(self):
        """Test percent escapes are decoded."""
        assert decode_uri_component("2019%2Fslug") == "2019/slug"


class TestSlugGenerator:
    """Tests for SlugGenerator."""

    def test_flat_prepare_keeps_escapes(self):
        """Test flat collections do not decode identifiers."""
        assert SlugGenerator().prepare("2019%2FSlug") == "2019%2fslug"

    def test_sub_folder_prepare_decodes(self):
        """Test sub-folder collections decode identifiers."""
        assert SlugGenerator(sub_folders=True).prepare("2019%2FSlug") == "2019/slug"

    def test_flat_finalize_flattens_slashes(self):
        """Test flat collections turn slashes into hyphens."""
        assert SlugGenerator().finalize("sub_dir/post title") == "sub_dir-post-title"

    def test_sub_folder_finalize_encodes(self):
        """Test sub-folder collections percent-encode the result."""
        generator = SlugGenerator(sub_folders=True)
        assert generator.finalize("sub_dir/post title") == "sub_dir%2Fpost%20title"
