"""Unit tests for string helpers."""
from __future__ import annotations

import pytest

from acommons.core.exceptions import ArgumentException
from acommons.lang import strings


@pytest.mark.unit
class TestSearch:
    """Test suite for contains/index_of/count_occurrences."""

    def test_contains_case_sensitive_by_default(self):
        """Test default comparison honours case."""
        assert strings.contains("AdGuard", "Guard")
        assert not strings.contains("AdGuard", "guard")

    def test_contains_case_insensitive(self):
        """Test casefold comparison."""
        assert strings.contains("STRASSE", "straße", case_sensitive=False)
        assert strings.contains("AdGuard", "GUARD", case_sensitive=False)

    def test_contains_empty_substring(self):
        """Test an empty substring is always found."""
        assert strings.contains("", "")
        assert strings.contains("abc", "")

    def test_index_of(self):
        """Test index_of with and without start offset."""
        assert strings.index_of("abcabc", "c") == 2
        assert strings.index_of("abcabc", "c", 3) == 5
        assert strings.index_of("abc", "z") == -1

    def test_count_occurrences(self):
        """Test non-overlapping occurrence counting."""
        assert strings.count_occurrences("aaaa", "aa") == 2
        assert strings.count_occurrences("abc", "") == 0
        assert strings.count_occurrences("", "a") == 0


@pytest.mark.unit
class TestTransform:
    """Test suite for replacing, trimming and case helpers."""

    def test_replace_all(self):
        """Test every occurrence is replaced."""
        assert strings.replace_all("a-b-c", "-", "+") == "a+b+c"

    def test_replace_all_rejects_empty_target(self):
        """Test empty target raises ArgumentException."""
        with pytest.raises(ArgumentException):
            strings.replace_all("abc", "", "x")

    def test_trim_whitespace(self):
        """Test leading and trailing whitespace including newlines is removed."""
        assert strings.trim_whitespace(" \t hello world\r\n") == "hello world"

    @pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
    def test_is_blank_true(self, value):
        """Test blank values."""
        assert strings.is_blank(value)

    def test_is_blank_false(self):
        """Test non-blank value."""
        assert not strings.is_blank(" x ")

    def test_ascii_lowercase_leaves_non_ascii(self):
        """Test only A-Z are lowercased."""
        assert strings.ascii_lowercase("HeLLo-ÄÖ-İ") == "hello-ÄÖ-İ"


@pytest.mark.unit
class TestSplitWithEscape:
    """Test suite for split_with_escape."""

    def test_plain_split(self):
        """Test splitting without escapes."""
        assert strings.split_with_escape("a,b,c", ",") == ["a", "b", "c"]

    def test_escaped_separator(self):
        """Test escaped separators stay in the part."""
        assert strings.split_with_escape(r"a,b\,c,d", ",") == ["a", "b,c", "d"]

    def test_escaped_escape(self):
        """Test a doubled escape yields a literal escape."""
        assert strings.split_with_escape(r"a\\,b", ",") == ["a\\", "b"]

    def test_trailing_escape_is_kept(self):
        """Test a lone trailing escape is preserved."""
        assert strings.split_with_escape("a,b\\", ",") == ["a", "b\\"]

    def test_empty_parts(self):
        """Test empty fields are preserved."""
        assert strings.split_with_escape(",a,", ",") == ["", "a", ""]
        assert strings.split_with_escape("", ",") == [""]

    def test_custom_escape(self):
        """Test a custom escape character."""
        assert strings.split_with_escape("a|b^|c", "|", escape="^") == ["a", "b|c"]

    @pytest.mark.parametrize(
        ("separator", "escape"),
        [(",,", "\\"), (",", ""), (",", ",")],
    )
    def test_invalid_characters(self, separator, escape):
        """Test separator/escape validation."""
        with pytest.raises(ArgumentException):
            strings.split_with_escape("a,b", separator, escape=escape)


@pytest.mark.unit
class TestTruncateAndHashes:
    """Test suite for truncate and digest helpers."""

    def test_truncate_short_text_unchanged(self):
        """Test text within the limit is returned as is."""
        assert strings.truncate("hello", 5) == "hello"

    def test_truncate_adds_ellipsis(self):
        """Test truncated text ends with the ellipsis and fits the limit."""
        result = strings.truncate("hello world", 5)
        assert result == "hell…"
        assert len(result) == 5

    def test_truncate_custom_ellipsis(self):
        """Test custom ellipsis."""
        assert strings.truncate("hello world", 8, ellipsis="...") == "hello..."

    def test_truncate_rejects_too_small_limit(self):
        """Test limit smaller than the ellipsis raises."""
        with pytest.raises(ArgumentException):
            strings.truncate("hello", 2, ellipsis="...")

    def test_sha256_hex(self):
        """Test SHA-256 digest of known input."""
        assert strings.sha256_hex("abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_md5_hex(self):
        """Test MD5 digest of known input."""
        assert strings.md5_hex("abc") == "900150983cd24fb0d6963f7d28e17f72"
