"""
Path segment validators.

Implements the three segment productions of RFC 3986, 3.3:

    segment       = *pchar
    segment-nz    = 1*pchar
    segment-nz-nc = 1*( unreserved / pct-encoded / sub-delims / "@" )
                  ; non-zero-length segment without any colon ":"

Each validator is a single immutable instance that returns a SegmentCheck
instead of raising, so a path grammar can try a branch and move on.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .charclass import decodes_cleanly, is_pchar, percent_encoded_run

__all__ = [
    "SegmentCheck",
    "SegmentValidator",
    "SEGMENT",
    "SEGMENT_NZ",
    "SEGMENT_NZ_NC",
    "scan_pchars",
]


@dataclass(frozen=True)
class SegmentCheck:
    """
    Outcome of validating one string against a character-class rule.

    Attributes:
        ok: Whether the string matched
        reason: Short description of the mismatch (None when ok)
        position: Index of the offending character (None when ok or empty)
    """
    ok: bool
    reason: Optional[str] = None
    position: Optional[int] = None

    def __bool__(self) -> bool:
        return self.ok


_OK = SegmentCheck(ok=True)


def scan_pchars(text: str, charset: str, extra: str = "", exclude: str = "") -> SegmentCheck:
    """
    Check that text consists only of pchar, valid pct-encoded runs and extra.

    Args:
        text: String to scan
        charset: Codec used to decode percent-encoded octets
        extra: Additional literal characters allowed (e.g. "/?" for query)
        exclude: pchar characters that are not allowed (e.g. ":")

    Returns:
        SegmentCheck; falsy at the first offending character
    """
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c == "%":
            octets, end = percent_encoded_run(text, i)
            if end == i:
                return SegmentCheck(False, "malformed percent-encoding", i)
            if not decodes_cleanly(octets, charset):
                return SegmentCheck(False, f"percent-encoded octets not valid {charset}", i)
            i = end
            continue
        if c in exclude:
            return SegmentCheck(False, f"character {c!r} not allowed", i)
        if not (is_pchar(c) or c in extra):
            return SegmentCheck(False, f"character {c!r} not allowed", i)
        i += 1
    return _OK


@dataclass(frozen=True)
class SegmentValidator:
    """
    Validator for one segment production.

    Attributes:
        name: ABNF rule name, used in SegmentCheck reasons
        non_empty: Reject the empty string (segment-nz, segment-nz-nc)
        allow_colon: Accept ":" (false only for segment-nz-nc)
    """
    name: str
    non_empty: bool = False
    allow_colon: bool = True

    def validate(self, segment: str, charset: str) -> SegmentCheck:
        if not segment:
            if self.non_empty:
                return SegmentCheck(False, f"{self.name} must not be empty")
            return _OK
        return scan_pchars(segment, charset, exclude="" if self.allow_colon else ":")


SEGMENT = SegmentValidator("segment")
SEGMENT_NZ = SegmentValidator("segment-nz", non_empty=True)
SEGMENT_NZ_NC = SegmentValidator("segment-nz-nc", non_empty=True, allow_colon=False)
