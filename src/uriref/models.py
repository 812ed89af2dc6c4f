"""
Report models returned by the Operations facade.

These Pydantic models carry validation outcomes to the printers and give the
CLI its --json output.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .path import PathGrammar
from .reference import ReferenceParts


class PathReport(BaseModel):
    """Outcome of validating a single path."""
    path: str = Field(..., description="Path as given (None reported as empty)")
    charset: str = Field(..., description="Codec used for percent-encoded octets")
    relative_reference: bool = Field(..., description="Validated as part of a relative reference")
    has_authority: bool = Field(..., description="Validated as following an authority")
    valid: bool = Field(..., description="Whether any applicable production accepted the path")
    grammar: Optional[PathGrammar] = Field(default=None, description="Accepting production")
    error: Optional[str] = Field(default=None, description="Error message when invalid")


class ComponentsModel(BaseModel):
    """Serializable form of ReferenceParts."""
    scheme: Optional[str] = None
    authority: Optional[str] = None
    path: str = ""
    query: Optional[str] = None
    fragment: Optional[str] = None

    @classmethod
    def from_parts(cls, parts: ReferenceParts) -> ComponentsModel:
        return cls(
            scheme=parts.scheme,
            authority=parts.authority,
            path=parts.path,
            query=parts.query,
            fragment=parts.fragment,
        )


class SplitReport(BaseModel):
    """Components of a reference and its recomposed form."""
    reference: str
    components: ComponentsModel
    recomposed: str
    relative_reference: bool
    has_authority: bool


class ReferenceReport(BaseModel):
    """Outcome of validating a whole URI reference."""
    reference: str
    charset: str
    valid: bool
    components: ComponentsModel
    path_grammar: Optional[PathGrammar] = None
    error: Optional[str] = Field(default=None, description="Error message when invalid")
    error_type: Optional[str] = Field(default=None, description="Exception class name when invalid")


__all__ = ["PathReport", "ComponentsModel", "SplitReport", "ReferenceReport"]
