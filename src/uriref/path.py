"""
Path component validation.

Validates the "path" component of a URI reference against RFC 3986, 3.3 and
the collected ABNF of Appendix A:

    hier-part     = "//" authority path-abempty
                  / path-absolute
                  / path-rootless
                  / path-empty

    relative-part = "//" authority path-abempty
                  / path-absolute
                  / path-noscheme
                  / path-empty

    path-abempty  = *( "/" segment )
    path-absolute = "/" [ segment-nz *( "/" segment ) ]
    path-noscheme = segment-nz-nc *( "/" segment )
    path-rootless = segment-nz *( "/" segment )
    path-empty    = 0<pchar>

Which productions apply depends only on the ValidationContext (authority
present, relative reference); the path content only decides pass/fail within
them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .errors import InvalidPathError
from .segment import SEGMENT, SEGMENT_NZ, SEGMENT_NZ_NC, SegmentValidator

__all__ = [
    "PathGrammar",
    "ValidationContext",
    "is_valid_path",
    "match_path_grammar",
    "validate_path",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationContext:
    """
    Caller-supplied context for validating one path.

    Attributes:
        charset: Codec used to validate percent-encoded octets
        relative_reference: The URI reference has no scheme
        has_authority: The URI reference has an authority ("//" prefix)
    """
    charset: str
    relative_reference: bool = False
    has_authority: bool = False


class PathGrammar(str, Enum):
    """The five path productions of RFC 3986, Appendix A."""
    PATH_ABEMPTY = "path-abempty"
    PATH_ABSOLUTE = "path-absolute"
    PATH_NOSCHEME = "path-noscheme"
    PATH_ROOTLESS = "path-rootless"
    PATH_EMPTY = "path-empty"

    @classmethod
    def candidates(cls, context: ValidationContext) -> Tuple[PathGrammar, ...]:
        """
        Productions applicable to a context, in evaluation order.

        With an authority only path-abempty applies. Without one, path-empty
        and path-absolute always apply, followed by path-noscheme for a
        relative reference or path-rootless otherwise.
        """
        if context.has_authority:
            return (cls.PATH_ABEMPTY,)
        if context.relative_reference:
            return (cls.PATH_EMPTY, cls.PATH_ABSOLUTE, cls.PATH_NOSCHEME)
        return (cls.PATH_EMPTY, cls.PATH_ABSOLUTE, cls.PATH_ROOTLESS)


def _segments_match(first: SegmentValidator, segments: List[str], charset: str) -> bool:
    if not first.validate(segments[0], charset):
        return False
    return all(SEGMENT.validate(segment, charset) for segment in segments[1:])


def _is_path_empty(path: str, charset: str) -> bool:
    return not path


def _is_path_abempty(path: str, charset: str) -> bool:
    if not path:
        return True
    if not path.startswith("/"):
        return False
    # "/".split keeps trailing empties, so "/a/" yields ["a", ""]
    return all(SEGMENT.validate(segment, charset) for segment in path[1:].split("/"))


def _is_path_absolute(path: str, charset: str) -> bool:
    if not path.startswith("/"):
        return False
    if len(path) == 1:
        return True
    return _segments_match(SEGMENT_NZ, path[1:].split("/"), charset)


def _is_path_noscheme(path: str, charset: str) -> bool:
    return _segments_match(SEGMENT_NZ_NC, path.split("/"), charset)


def _is_path_rootless(path: str, charset: str) -> bool:
    return _segments_match(SEGMENT_NZ, path.split("/"), charset)


_MATCHERS: Dict[PathGrammar, Callable[[str, str], bool]] = {
    PathGrammar.PATH_EMPTY: _is_path_empty,
    PathGrammar.PATH_ABEMPTY: _is_path_abempty,
    PathGrammar.PATH_ABSOLUTE: _is_path_absolute,
    PathGrammar.PATH_NOSCHEME: _is_path_noscheme,
    PathGrammar.PATH_ROOTLESS: _is_path_rootless,
}


def match_path_grammar(path: Optional[str], context: ValidationContext) -> Optional[PathGrammar]:
    """
    Find the production that accepts a path.

    Args:
        path: Path value; None is treated as the empty path
        context: Validation context for this call

    Returns:
        The accepting PathGrammar, or None if every candidate rejected the path

    Examples:
        >>> match_path_grammar("/a/b", ValidationContext("utf-8"))
        <PathGrammar.PATH_ABSOLUTE: 'path-absolute'>

        >>> match_path_grammar("a:b", ValidationContext("utf-8", relative_reference=True)) is None
        True
    """
    path = path or ""
    for grammar in PathGrammar.candidates(context):
        if _MATCHERS[grammar](path, context.charset):
            return grammar
    return None


def is_valid_path(
    path: Optional[str],
    charset: str,
    relative_reference: bool,
    has_authority: bool,
) -> bool:
    """Check a path against the productions allowed by the given flags."""
    context = ValidationContext(charset, relative_reference, has_authority)
    return match_path_grammar(path, context) is not None


def validate_path(
    path: Optional[str],
    charset: str,
    relative_reference: bool,
    has_authority: bool,
) -> None:
    """
    Validate a path value.

    RFC 3986, 3.3: if a URI contains an authority component, then the path
    must either be empty or begin with "/". If it does not, the path cannot
    begin with "//". A relative-path reference's first segment cannot
    contain ":".

    Args:
        path: Path value; None and "" are equivalent
        charset: Codec the path was percent-encoded with
        relative_reference: The URI reference is a relative reference
        has_authority: The URI reference has an authority

    Raises:
        InvalidPathError: If no applicable production accepts the path
    """
    if is_valid_path(path, charset, relative_reference, has_authority):
        return

    logger.debug(
        f"Rejected path {path!r} (charset={charset}, relative={relative_reference}, "
        f"authority={has_authority})"
    )
    raise InvalidPathError(path)
