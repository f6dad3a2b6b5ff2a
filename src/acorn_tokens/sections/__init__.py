"""
Section system - readable, stable ordering of emitted declarations.

Sections are labelled groups that appear as comment headings in the CSS.
"""

from acorn_tokens.sections.grouper import (
    TOKEN_SECTIONS,
    GroupedTokens,
    SectionRule,
    TokenSection,
    compare_token_names,
    format_sections,
    group_tokens,
    heading_lines,
    locale_compare,
    normalize_token_name,
    section,
    sort_tokens,
    token_parts,
)

__all__ = [
    "TOKEN_SECTIONS",
    "GroupedTokens",
    "SectionRule",
    "TokenSection",
    "compare_token_names",
    "format_sections",
    "group_tokens",
    "heading_lines",
    "locale_compare",
    "normalize_token_name",
    "section",
    "sort_tokens",
    "token_parts",
]
