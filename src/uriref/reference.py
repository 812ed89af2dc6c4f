"""
URI reference decomposition and reconstruction.

Splits a reference into its five components with the regular expression of
RFC 3986, Appendix B, recomposes them per section 5.3, and validates the
components with the flags the split implies.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .components import validate_fragment, validate_query, validate_scheme
from .path import validate_path

__all__ = ["ReferenceParts", "split_reference", "validate_reference"]

logger = logging.getLogger(__name__)

# RFC 3986, Appendix B. Parsing a URI Reference with a Regular Expression
_REFERENCE_RE = re.compile(
    r"^(?:(?P<scheme>[^:/?#]+):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?$",
    re.DOTALL,
)


@dataclass(frozen=True)
class ReferenceParts:
    """
    Components of a URI reference.

    None marks an absent component, "" a present but empty one, so "x?" and
    "x" keep their distinction through recompose(). The path is always
    present (possibly empty).

    Attributes:
        scheme: Scheme without the trailing ":"
        authority: Authority without the leading "//"
        path: Path, possibly empty
        query: Query without the leading "?"
        fragment: Fragment without the leading "#"
    """
    scheme: Optional[str]
    authority: Optional[str]
    path: str
    query: Optional[str] = None
    fragment: Optional[str] = None

    @property
    def is_relative(self) -> bool:
        """A reference without a scheme is a relative reference."""
        return self.scheme is None

    @property
    def has_authority(self) -> bool:
        return self.authority is not None

    def recompose(self) -> str:
        """
        Rebuild the reference string (RFC 3986, 5.3).

        Examples:
            >>> split_reference("http://example.com/a?b#c").recompose()
            'http://example.com/a?b#c'
        """
        result = []
        if self.scheme is not None:
            result.append(self.scheme + ":")
        if self.authority is not None:
            result.append("//" + self.authority)
        result.append(self.path)
        if self.query is not None:
            result.append("?" + self.query)
        if self.fragment is not None:
            result.append("#" + self.fragment)
        return "".join(result)


def split_reference(text: Optional[str]) -> ReferenceParts:
    """
    Split a URI reference into its components.

    The split is purely syntactic and never fails; use validate_reference()
    to check the components.

    Examples:
        >>> split_reference("foo://example.com:8042/over/there?name=ferret#nose")
        ReferenceParts(scheme='foo', authority='example.com:8042', path='/over/there', query='name=ferret', fragment='nose')

        >>> split_reference("a/b")
        ReferenceParts(scheme=None, authority=None, path='a/b', query=None, fragment=None)
    """
    # Every group is optional, so the pattern matches any string.
    match = _REFERENCE_RE.match(text or "")
    return ReferenceParts(
        scheme=match.group("scheme"),
        authority=match.group("authority"),
        path=match.group("path"),
        query=match.group("query"),
        fragment=match.group("fragment"),
    )


def validate_reference(text: Optional[str], charset: str) -> ReferenceParts:
    """
    Split and validate a URI reference.

    The path is validated as part of a relative reference when there is no
    scheme, and as path-abempty when there is an authority. The authority
    itself is not validated.

    Args:
        text: URI reference
        charset: Codec the reference was percent-encoded with

    Returns:
        The validated ReferenceParts

    Raises:
        InvalidSchemeError: If the scheme is malformed
        InvalidPathError: If the path matches no applicable production
        InvalidQueryError: If the query contains disallowed characters
        InvalidFragmentError: If the fragment contains disallowed characters
    """
    parts = split_reference(text)
    logger.debug(f"Split {text!r} into {parts}")

    if parts.scheme is not None:
        validate_scheme(parts.scheme)
    validate_path(parts.path, charset, parts.is_relative, parts.has_authority)
    validate_query(parts.query, charset)
    validate_fragment(parts.fragment, charset)
    return parts
