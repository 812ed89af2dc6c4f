"""
Scheme, query and fragment validators.

Same shape as the path validators: boolean checks plus validate_* entry
points that raise a component-specific UriError.

    scheme   = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
    query    = *( pchar / "/" / "?" )
    fragment = *( pchar / "/" / "?" )
"""
from __future__ import annotations

import logging
from typing import Optional

from .charclass import is_alpha, is_digit
from .errors import InvalidFragmentError, InvalidQueryError, InvalidSchemeError
from .segment import scan_pchars

__all__ = [
    "is_valid_scheme",
    "is_valid_query",
    "is_valid_fragment",
    "validate_scheme",
    "validate_query",
    "validate_fragment",
]

logger = logging.getLogger(__name__)


def is_valid_scheme(scheme: Optional[str]) -> bool:
    if not scheme or not is_alpha(scheme[0]):
        return False
    return all(is_alpha(c) or is_digit(c) or c in "+-." for c in scheme[1:])


def is_valid_query(query: Optional[str], charset: str) -> bool:
    if query is None:
        return True
    return bool(scan_pchars(query, charset, extra="/?"))


def is_valid_fragment(fragment: Optional[str], charset: str) -> bool:
    if fragment is None:
        return True
    return bool(scan_pchars(fragment, charset, extra="/?"))


def validate_scheme(scheme: Optional[str]) -> None:
    """
    Validate a scheme value.

    Raises:
        InvalidSchemeError: If the scheme is empty or does not match the ABNF
    """
    if not is_valid_scheme(scheme):
        logger.debug(f"Rejected scheme {scheme!r}")
        raise InvalidSchemeError(scheme)


def validate_query(query: Optional[str], charset: str) -> None:
    if not is_valid_query(query, charset):
        logger.debug(f"Rejected query {query!r} (charset={charset})")
        raise InvalidQueryError(query)


def validate_fragment(fragment: Optional[str], charset: str) -> None:
    if not is_valid_fragment(fragment, charset):
        logger.debug(f"Rejected fragment {fragment!r} (charset={charset})")
        raise InvalidFragmentError(fragment)
