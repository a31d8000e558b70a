"""
Unit tests for URL escape decoding.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from imagescout.extractor.normalizer import clean_url
from imagescout.extractor.validator import is_valid_image_url

# Characters found in already-clean URLs: no backslashes, no entities.
URL_ALPHABET = st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-._~:/?#[]@!$'()*+,;=%")


@pytest.mark.unit
class TestCleanUrl:
    """Test cases for clean_url."""

    def test_escaped_slashes_and_lowercase_hex_escapes(self):
        raw = "https:\\/\\/site.com\\/img.png\\u003fx\\u003d1"
        assert clean_url(raw) == "https://site.com/img.png?x=1"
        assert is_valid_image_url(clean_url(raw))

    @pytest.mark.parametrize(
        "escape,expected",
        [
            ("\\u003d", "="),
            ("\\u0026", "&"),
            ("\\u002F", "/"),
            ("\\u002f", "/"),
            ("\\u003F", "?"),
            ("\\u003A", ":"),
        ],
    )
    def test_each_unicode_escape(self, escape, expected):
        assert clean_url(f"https://a.com/x{escape}y.jpg") == f"https://a.com/x{expected}y.jpg"

    def test_other_unicode_escapes_untouched(self):
        raw = "https://a.com/caf\\u00e9.jpg"
        assert clean_url(raw) == raw

    def test_html_entity_ampersand(self):
        assert clean_url("https://a.com/p.jpg?w=1&amp;h=2") == "https://a.com/p.jpg?w=1&h=2"

    def test_trims_whitespace(self):
        assert clean_url("  https://a.com/p.jpg \n\t") == "https://a.com/p.jpg"

    def test_escape_decoded_before_entity(self):
        # &amp; decodes to &amp; and then to &
        assert clean_url("https://a.com/p.jpg?a=1\\u0026amp;b=2") == "https://a.com/p.jpg?a=1&b=2"

    def test_never_raises_on_garbage(self):
        assert clean_url("") == ""
        assert clean_url("   ") == ""
        assert clean_url("not a url \\u") == "not a url \\u"

    def test_already_clean_url_unchanged(self):
        url = "https://images.example.com/a/b/photo.jpeg?size=large&v=2"
        assert clean_url(url) == url

    @given(st.text(alphabet=URL_ALPHABET, max_size=80))
    def test_idempotent_on_normalized_urls(self, tail):
        normalized = clean_url("https://example.com/" + tail)
        assert clean_url(normalized) == normalized
