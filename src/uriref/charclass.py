"""
Character classes from RFC 3986.

Single-character membership tests for the classes used by the collected
ABNF (unreserved, sub-delims, gen-delims, pchar) plus percent-encoding
checks. Percent-encoded octets are validated against the caller's charset:
a run of adjacent triplets must decode cleanly as a whole.

All helpers return booleans and never raise.
"""
from __future__ import annotations

import codecs
from typing import Tuple

__all__ = [
    "GEN_DELIMS",
    "SUB_DELIMS",
    "UNRESERVED",
    "is_alpha",
    "is_digit",
    "is_hexdig",
    "is_unreserved",
    "is_sub_delim",
    "is_gen_delim",
    "is_reserved",
    "is_pchar",
    "is_valid_percent_encoded_triplet",
    "percent_encoded_run",
    "decodes_cleanly",
]

ALPHA = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
DIGIT = frozenset("0123456789")
HEXDIG = DIGIT | frozenset("ABCDEFabcdef")

#   unreserved    = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED = ALPHA | DIGIT | frozenset("-._~")

#   gen-delims    = ":" / "/" / "?" / "#" / "[" / "]" / "@"
GEN_DELIMS = frozenset(":/?#[]@")

#   sub-delims    = "!" / "$" / "&" / "'" / "(" / ")"
#                 / "*" / "+" / "," / ";" / "="
SUB_DELIMS = frozenset("!$&'()*+,;=")

#   pchar         = unreserved / pct-encoded / sub-delims / ":" / "@"
_PCHAR = UNRESERVED | SUB_DELIMS | frozenset(":@")


def is_alpha(c: str) -> bool:
    return c in ALPHA


def is_digit(c: str) -> bool:
    return c in DIGIT


def is_hexdig(c: str) -> bool:
    return c in HEXDIG


def is_unreserved(c: str) -> bool:
    return c in UNRESERVED


def is_sub_delim(c: str) -> bool:
    return c in SUB_DELIMS


def is_gen_delim(c: str) -> bool:
    return c in GEN_DELIMS


def is_reserved(c: str) -> bool:
    """reserved = gen-delims / sub-delims"""
    return c in GEN_DELIMS or c in SUB_DELIMS


def is_pchar(c: str) -> bool:
    """
    Check whether a single character is a literal pchar.

    The pct-encoded alternative spans three characters and is handled by
    percent_encoded_run() instead, so "%" itself is not a pchar here.
    """
    return c in _PCHAR


def _is_triplet(s: str, index: int) -> bool:
    return (
        index + 2 < len(s)
        and s[index] == "%"
        and s[index + 1] in HEXDIG
        and s[index + 2] in HEXDIG
    )


def percent_encoded_run(s: str, index: int) -> Tuple[bytes, int]:
    """
    Collect consecutive percent-encoded triplets starting at index.

    Args:
        s: String being scanned
        index: Position of the first "%"

    Returns:
        Tuple of (decoded octets, index just past the run). When the first
        triplet is malformed the octets are empty and the index is unchanged.

    Examples:
        >>> percent_encoded_run("a%C3%A9b", 1)
        (b'\\xc3\\xa9', 7)

        >>> percent_encoded_run("%2", 0)
        (b'', 0)
    """
    octets = bytearray()
    pos = index
    while _is_triplet(s, pos):
        octets.append(int(s[pos + 1:pos + 3], 16))
        pos += 3
    return bytes(octets), pos


def decodes_cleanly(octets: bytes, charset: str) -> bool:
    """
    Strictly decode octets; any decoder failure is a rejection.

    Unknown codecs and codecs that are not text encodings (e.g. "hex",
    "zlib", "rot13") reject every octet sequence.
    """
    try:
        info = codecs.lookup(charset)
    except (LookupError, TypeError):
        return False
    if not getattr(info, "_is_text_encoding", True):
        return False
    try:
        info.decode(octets, "strict")
    except UnicodeDecodeError:
        return False
    return True


def is_valid_percent_encoded_triplet(s: str, index: int, charset: str) -> bool:
    """
    Check that s[index] starts a valid pct-encoded octet under charset.

    A triplet that is the lead byte of a multi-byte sequence is judged
    together with the triplets that follow it, so "%C3%A9" is valid under
    UTF-8 at index 0 while "%C3" alone is not.

    Args:
        s: String being validated
        index: Position of the "%"
        charset: Codec name used to interpret the decoded octets

    Returns:
        True if the triplet (and its run) decodes cleanly
    """
    octets, end = percent_encoded_run(s, index)
    if end == index:
        return False
    return decodes_cleanly(octets, charset)
