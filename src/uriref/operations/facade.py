"""
Operations Facade - Application service layer.

Sits between the CLI and the validators: applies the configured charset,
turns validation outcomes into report models and keeps CLI commands thin.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidPathError, UriError
from ..models import ComponentsModel, PathReport, ReferenceReport, SplitReport
from ..path import ValidationContext, match_path_grammar
from ..reference import split_reference, validate_reference
from ..settings import Settings, create_settings_from_env, normalize_charset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpsConfig:
    """
    Configuration for Operations facade.

    Output policy only; validation behaviour comes from Settings.
    """
    json: bool = False            # Emit JSON reports instead of human text
    verbose: bool = False         # Show detailed output


class Operations:
    """
    Application service facade for CLI operations.

    One method per CLI verb. Validation failures are reported in the
    returned model rather than raised, so callers can print them before
    choosing an exit code; configuration errors (bad charset) propagate.
    """

    def __init__(self, config: OpsConfig, settings: Optional[Settings] = None):
        """
        Initialize Operations facade.

        Args:
            config: Output configuration
            settings: Optional settings (if None, loaded from environment)
        """
        self.cfg = config
        self.settings = settings if settings is not None else create_settings_from_env()

    def _charset(self, override: Optional[str]) -> str:
        if override:
            return normalize_charset(override)
        return self.settings.charset

    def check_path(
        self,
        path: Optional[str],
        relative_reference: bool = False,
        has_authority: bool = False,
        charset: Optional[str] = None,
    ) -> PathReport:
        """
        Validate a bare path under explicit context flags.

        Args:
            path: Path value
            relative_reference: Validate as part of a relative reference
            has_authority: Validate as following an authority
            charset: Charset override (defaults to settings.charset)

        Returns:
            PathReport with the accepting production, if any

        Raises:
            InvalidCharsetError: If the charset override is unusable
        """
        cs = self._charset(charset)
        context = ValidationContext(cs, relative_reference, has_authority)
        grammar = match_path_grammar(path, context)
        logger.debug(f"Path {path!r} matched {grammar} under {context}")

        return PathReport(
            path=path or "",
            charset=cs,
            relative_reference=relative_reference,
            has_authority=has_authority,
            valid=grammar is not None,
            grammar=grammar,
            error=None if grammar is not None else InvalidPathError.message,
        )

    def check_reference(self, reference: str, charset: Optional[str] = None) -> ReferenceReport:
        """
        Split and validate a whole URI reference.

        Returns:
            ReferenceReport; error and error_type are set when invalid

        Raises:
            InvalidCharsetError: If the charset override is unusable
        """
        cs = self._charset(charset)
        try:
            parts = validate_reference(reference, cs)
        except UriError as e:
            logger.debug(f"Reference {reference!r} rejected: {type(e).__name__}")
            return ReferenceReport(
                reference=reference,
                charset=cs,
                valid=False,
                components=ComponentsModel.from_parts(split_reference(reference)),
                error=str(e),
                error_type=type(e).__name__,
            )

        context = ValidationContext(cs, parts.is_relative, parts.has_authority)
        return ReferenceReport(
            reference=reference,
            charset=cs,
            valid=True,
            components=ComponentsModel.from_parts(parts),
            path_grammar=match_path_grammar(parts.path, context),
        )

    def split(self, reference: str) -> SplitReport:
        """Decompose a reference without validating it."""
        parts = split_reference(reference)
        return SplitReport(
            reference=reference,
            components=ComponentsModel.from_parts(parts),
            recomposed=parts.recompose(),
            relative_reference=parts.is_relative,
            has_authority=parts.has_authority,
        )
