"""
Tests for the segment, segment-nz and segment-nz-nc validators.
"""
from __future__ import annotations

import pytest

from uriref.segment import SEGMENT, SEGMENT_NZ, SEGMENT_NZ_NC, SegmentCheck, scan_pchars


class TestSegmentCheck:
    """Test the SegmentCheck result type."""

    def test_truthiness_follows_ok(self):
        """Test that a SegmentCheck converts directly to a boolean."""
        assert SegmentCheck(True)
        assert not SegmentCheck(False, "bad", 0)

    def test_failure_reports_position(self):
        """Test that the first offending index is reported."""
        result = SEGMENT.validate("ab cd", "utf-8")
        assert not result
        assert result.position == 2
        assert "' '" in result.reason


class TestSegment:
    """Test segment = *pchar."""

    def test_empty_accepted(self):
        """Test that the empty segment is legal."""
        assert SEGMENT.validate("", "utf-8")

    @pytest.mark.parametrize("segment", ["a", "a:b", "@x", "!$&'()*+,;=", "a%2Fb", "~user", "..", "."])
    def test_valid(self, segment):
        """Test legal segments."""
        assert SEGMENT.validate(segment, "utf-8")

    @pytest.mark.parametrize("segment", ["a/b", "a?b", "a#b", "[x]", "a b", "%2", "%GZ", "é"])
    def test_invalid(self, segment):
        """Test illegal segments."""
        assert not SEGMENT.validate(segment, "utf-8")


class TestSegmentNz:
    """Test segment-nz = 1*pchar."""

    def test_empty_rejected(self):
        """Test that the empty segment is rejected with a reason."""
        result = SEGMENT_NZ.validate("", "utf-8")
        assert not result
        assert result.reason == "segment-nz must not be empty"

    def test_colon_allowed(self):
        """Test that a colon is legal in segment-nz."""
        assert SEGMENT_NZ.validate("a:b", "utf-8")


class TestSegmentNzNc:
    """Test segment-nz-nc (no colon)."""

    def test_empty_rejected(self):
        """Test that the empty segment is rejected."""
        assert not SEGMENT_NZ_NC.validate("", "utf-8")

    @pytest.mark.parametrize("segment", [":", "a:", ":b", "a:b"])
    def test_colon_rejected(self, segment):
        """Test that a colon anywhere is rejected."""
        assert not SEGMENT_NZ_NC.validate(segment, "utf-8")

    def test_encoded_colon_accepted(self):
        """Test that a percent-encoded colon is not a colon."""
        assert SEGMENT_NZ_NC.validate("a%3Ab", "utf-8")

    def test_validators_are_reusable(self):
        """Test that repeated calls give identical results."""
        results = {bool(SEGMENT_NZ_NC.validate("a:b", "utf-8")) for _ in range(3)}
        assert results == {False}


class TestScanPchars:
    """Test the shared scanner used by query and fragment validators."""

    def test_extra_characters(self):
        """Test that extra widens the allowed set."""
        assert not scan_pchars("a/b?c", "utf-8")
        assert scan_pchars("a/b?c", "utf-8", extra="/?")

    def test_charset_failure_reason(self):
        """Test that an undecodable run names the charset."""
        result = scan_pchars("x%FF", "utf-8")
        assert not result
        assert result.position == 1
        assert "utf-8" in result.reason
