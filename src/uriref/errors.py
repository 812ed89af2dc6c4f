"""
URI reference validation error classes.

Only the top-level validate_* entry points raise these. Grammar branches and
segment checks report mismatches as plain results, so a rejected branch never
costs an exception.
"""
from __future__ import annotations

from typing import Optional


class UriError(ValueError):
    """
    Base class for all URI reference validation errors.

    Subclasses carry a fixed message; the rejected input is kept on the
    exception as ``value`` for callers that need to re-derive diagnostics.
    """
    message = "The URI reference is invalid."

    def __init__(self, value: Optional[str] = None, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.value = value


class InvalidPathError(UriError):
    """Raised when no path grammar accepts the path value."""
    message = "The path value is invalid."


class InvalidSchemeError(UriError):
    """Raised when the scheme is not ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )."""
    message = "The scheme value is invalid."


class InvalidQueryError(UriError):
    message = "The query value is invalid."


class InvalidFragmentError(UriError):
    message = "The fragment value is invalid."


class InvalidCharsetError(UriError):
    """
    Charset cannot be used to validate percent-encoded octets.

    Raised when:
    - The codec name is unknown
    - The codec is not a text encoding (e.g. "hex", "base64")
    """
    message = "The charset is not a usable text encoding."


__all__ = [
    "UriError",
    "InvalidPathError",
    "InvalidSchemeError",
    "InvalidQueryError",
    "InvalidFragmentError",
    "InvalidCharsetError",
]
