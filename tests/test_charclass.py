"""
Tests for RFC 3986 character classes and percent-encoding checks.
"""
from __future__ import annotations

import pytest

from uriref.charclass import (
    decodes_cleanly,
    is_gen_delim,
    is_hexdig,
    is_pchar,
    is_reserved,
    is_sub_delim,
    is_unreserved,
    is_valid_percent_encoded_triplet,
    percent_encoded_run,
)


class TestCharacterClasses:
    """Test single-character class membership."""

    def test_unreserved(self):
        """Test ALPHA / DIGIT / "-" / "." / "_" / "~"."""
        for c in "azAZ09-._~":
            assert is_unreserved(c)
        for c in "%/:@ !é":
            assert not is_unreserved(c)

    def test_sub_delims(self):
        """Test the eleven sub-delims."""
        for c in "!$&'()*+,;=":
            assert is_sub_delim(c)
        assert not is_sub_delim(":")
        assert not is_sub_delim("/")

    def test_gen_delims(self):
        """Test the seven gen-delims."""
        for c in ":/?#[]@":
            assert is_gen_delim(c)
        assert not is_gen_delim("!")

    def test_reserved_is_union(self):
        """Test reserved = gen-delims / sub-delims."""
        assert is_reserved("#")
        assert is_reserved("=")
        assert not is_reserved("a")

    def test_pchar(self):
        """Test pchar literals: unreserved, sub-delims, ":" and "@"."""
        for c in "a~!=:@":
            assert is_pchar(c)
        for c in "/?#[]% é":
            assert not is_pchar(c)

    def test_hexdig_accepts_both_cases(self):
        """Test that HEXDIG accepts lower and upper case letters."""
        for c in "09afAF":
            assert is_hexdig(c)
        assert not is_hexdig("g")
        assert not is_hexdig("G")


class TestPercentEncoding:
    """Test percent-encoded triplet validation under a charset."""

    def test_run_collects_adjacent_triplets(self):
        """Test that adjacent triplets are decoded as one run."""
        assert percent_encoded_run("a%C3%A9b", 1) == (b"\xc3\xa9", 7)

    def test_run_stops_at_malformed_triplet(self):
        """Test that a malformed first triplet yields an empty run."""
        assert percent_encoded_run("%2", 0) == (b"", 0)
        assert percent_encoded_run("%GZ", 0) == (b"", 0)

    def test_run_stops_before_trailing_garbage(self):
        """Test that a valid triplet followed by a broken one ends the run early."""
        assert percent_encoded_run("%41%4", 0) == (b"A", 3)

    @pytest.mark.parametrize("text", ["%2F", "%2f", "%41", "%C3%A9", "%E2%82%AC"])
    def test_valid_utf8_triplets(self, text, utf8):
        """Test well-formed triplets that decode as UTF-8."""
        assert is_valid_percent_encoded_triplet(text, 0, utf8)

    @pytest.mark.parametrize("text", ["%2", "%", "%GZ", "%2G", "2F"])
    def test_malformed_triplets(self, text, utf8):
        """Test that malformed triplets are rejected."""
        assert not is_valid_percent_encoded_triplet(text, 0, utf8)

    def test_lone_utf8_lead_byte_rejected(self, utf8):
        """Test that an incomplete multi-byte sequence is rejected."""
        assert not is_valid_percent_encoded_triplet("%C3", 0, utf8)
        assert not is_valid_percent_encoded_triplet("%FF", 0, utf8)

    def test_charset_changes_outcome(self):
        """Test that the same octet can be valid in one charset and not another."""
        assert not is_valid_percent_encoded_triplet("%E9", 0, "utf-8")
        assert is_valid_percent_encoded_triplet("%E9", 0, "latin-1")
        assert not is_valid_percent_encoded_triplet("%80", 0, "ascii")

    def test_decode_failures_are_false(self):
        """Test that decoder failures and unknown codecs are reported as False."""
        assert decodes_cleanly(b"abc", "ascii")
        assert not decodes_cleanly(b"\xff", "utf-8")
        assert not decodes_cleanly(b"abc", "no-such-codec")

    @pytest.mark.parametrize("charset", ["hex", "base64", "rot13", "zlib", "bz2"])
    def test_non_text_codecs_are_false(self, charset):
        """Test that bytes-to-bytes and str-to-str codecs reject instead of raising."""
        assert not decodes_cleanly(b"/", charset)
        assert not is_valid_percent_encoded_triplet("%2F", 0, charset)
