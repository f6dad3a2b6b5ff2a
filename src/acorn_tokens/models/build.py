"""
Build models - what a token build produces.

A build yields one CSS document per destination plus the diagnostics
collected along the way (unclaimed, overlapping and unsectioned tokens).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from acorn_tokens.constants import DiagnosticSeverity


class DiagnosticCode(str, Enum):
    """Kinds of build diagnostics."""

    UNCLAIMED = "unclaimed"
    OVERLAP = "overlap"
    UNSECTIONED = "unsectioned"
    UNKNOWN_REFERENCE = "unknown-reference"


class BuildDiagnostic(BaseModel):
    """A single build diagnostic."""

    code: DiagnosticCode
    token: str = Field(..., description="Token name the diagnostic refers to")
    message: str
    severity: DiagnosticSeverity = "warning"
    destination: str | None = Field(None, description="Destination file, when relevant")

    model_config = {"frozen": True}


class BuildResult(BaseModel):
    """Output of a full build."""

    files: dict[str, str] = Field(
        default_factory=dict,
        description="Destination path to CSS text, in destination order",
    )
    diagnostics: list[BuildDiagnostic] = Field(default_factory=list)
    token_count: int = 0

    @property
    def has_errors(self) -> bool:
        """Whether any diagnostic is an error."""
        return any(d.severity == "error" for d in self.diagnostics)

    def diagnostics_for(self, code: DiagnosticCode) -> list[BuildDiagnostic]:
        """Get diagnostics of one kind."""
        return [d for d in self.diagnostics if d.code == code]
