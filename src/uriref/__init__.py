"""
uriref - RFC 3986 URI reference validation.

Validates path, scheme, query and fragment components against the collected
ABNF of RFC 3986 and splits/recomposes references into their components.
"""
from .errors import (
    InvalidCharsetError,
    InvalidFragmentError,
    InvalidPathError,
    InvalidQueryError,
    InvalidSchemeError,
    UriError,
)
from .path import PathGrammar, ValidationContext, is_valid_path, match_path_grammar, validate_path
from .reference import ReferenceParts, split_reference, validate_reference

__all__ = [
    "InvalidCharsetError",
    "InvalidFragmentError",
    "InvalidPathError",
    "InvalidQueryError",
    "InvalidSchemeError",
    "UriError",
    "PathGrammar",
    "ValidationContext",
    "is_valid_path",
    "match_path_grammar",
    "validate_path",
    "ReferenceParts",
    "split_reference",
    "validate_reference",
]
