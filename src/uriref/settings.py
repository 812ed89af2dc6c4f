"""
Settings and configuration for uriref.

The validators themselves never pick a charset; the CLI and the Operations
facade read one from here. Loads settings from environment variables.
"""
from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass

from .errors import InvalidCharsetError

__all__ = ["Settings", "create_settings_from_env", "normalize_charset"]

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def normalize_charset(charset: str) -> str:
    """
    Resolve a codec name to its canonical form.

    Raises:
        InvalidCharsetError: If the codec is unknown or not a text encoding

    Examples:
        >>> normalize_charset("UTF8")
        'utf-8'

        >>> normalize_charset("latin_1")
        'iso8859-1'
    """
    try:
        info = codecs.lookup(charset)
    except (LookupError, TypeError) as e:
        raise InvalidCharsetError(charset) from e
    # bytes-to-bytes codecs such as "hex" cannot judge decoded characters
    if not getattr(info, "_is_text_encoding", True):
        raise InvalidCharsetError(charset)
    return info.name


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for uriref.

    Attributes:
        charset: Codec used to validate percent-encoded octets
        log_level: Root logging level applied by the CLI
    """
    charset: str = "utf-8"
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings on construction."""
        if not self.charset:
            raise InvalidCharsetError(self.charset)
        # frozen dataclass: write through object.__setattr__
        object.__setattr__(self, "charset", normalize_charset(self.charset))

        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Use one of {', '.join(_LOG_LEVELS)}")
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - URIREF_CHARSET (default: utf-8)
        - URIREF_LOG_LEVEL (default: WARNING)

    Returns:
        Settings object with validated configuration

    Raises:
        InvalidCharsetError: If URIREF_CHARSET names an unusable codec
        ValueError: If URIREF_LOG_LEVEL is not a logging level name

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    return Settings(
        charset=os.getenv("URIREF_CHARSET") or "utf-8",
        log_level=os.getenv("URIREF_LOG_LEVEL") or "WARNING",
    )
