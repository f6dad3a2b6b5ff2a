"""
Pydantic models for the token build.

This module provides:
- Token: A named design value with its authored value object
- ResolvedToken: A token value ready for CSS emission
- TokenReference: A `{path.to.token}` reference inside a value
- BuildDiagnostic / BuildResult: Build output and findings
"""

from acorn_tokens.models.build import (
    BuildDiagnostic,
    BuildResult,
    DiagnosticCode,
)
from acorn_tokens.models.token import ResolvedToken, Token, TokenReference

__all__ = [
    "BuildDiagnostic",
    "BuildResult",
    "DiagnosticCode",
    "ResolvedToken",
    "Token",
    "TokenReference",
]
