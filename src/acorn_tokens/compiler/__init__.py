"""
Compilation pipeline - from tokens to stylesheets.

This module provides:
- css: Stylesheet formatting (:root and @media blocks, sections)
- builder: Whole-build orchestration across destinations
"""

from acorn_tokens.compiler.builder import TokenBuilder
from acorn_tokens.compiler.css import (
    FormattedBlock,
    FormattedStylesheet,
    format_block,
    format_stylesheet,
    format_variables,
    resolve_tokens,
)

__all__ = [
    "FormattedBlock",
    "FormattedStylesheet",
    "TokenBuilder",
    "format_block",
    "format_stylesheet",
    "format_variables",
    "resolve_tokens",
]
