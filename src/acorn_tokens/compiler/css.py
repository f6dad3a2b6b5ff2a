"""
CSS emitter - the end of the pipeline.

Turns a destination's tokens into a stylesheet: a :root block for the
default axis, then one @media block per media-query axis that has
values. All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from acorn_tokens.constants import (
    INDENTATION,
    LICENSE_HEADER,
    MEDIA_QUERY_ORDER,
    MEDIA_QUERY_PROPERTY_MAP,
    Axis,
)
from acorn_tokens.models.token import ResolvedToken, Token
from acorn_tokens.resolution import resolve_token_value, transform_token
from acorn_tokens.sections import TOKEN_SECTIONS, SectionRule, format_sections, group_tokens
from acorn_tokens.tokens import TokenDictionary


@dataclass
class FormattedBlock:
    """CSS for one axis plus the tokens that matched no section."""

    css: str = ""
    unsectioned: list[ResolvedToken] = field(default_factory=list)


@dataclass
class FormattedStylesheet:
    """A complete stylesheet and the tokens left out of it."""

    css: str
    unsectioned: list[ResolvedToken] = field(default_factory=list)


def resolve_tokens(
    tokens: Sequence[Token],
    axis: Axis,
    dictionary: TokenDictionary,
) -> list[ResolvedToken]:
    """
    Resolve every applicable token for an axis.

    Tokens without a value for the axis (after the brand fallback) are
    skipped.
    """
    resolved: list[ResolvedToken] = []
    for token in tokens:
        value, surface = resolve_token_value(token, axis)
        if value is None:
            continue
        resolved.append(transform_token(token, value, dictionary, surface))
    return resolved


def format_variables(
    tokens: Sequence[ResolvedToken],
    dictionary: TokenDictionary,
    rules: Sequence[SectionRule] = TOKEN_SECTIONS,
    indentation: str = INDENTATION,
) -> tuple[str, list[ResolvedToken]]:
    """
    Format resolved tokens as sectioned custom property lines.

    Returns:
        (declarations, unsectioned tokens)
    """
    grouped = group_tokens(tokens, rules)
    lines = format_sections(
        grouped,
        lambda token: dictionary.format_property(token, indentation),
        indentation,
    )
    return "\n".join(lines), grouped.unsectioned


def format_block(
    tokens: Sequence[Token],
    dictionary: TokenDictionary,
    media_query: str | None = None,
    rules: Sequence[SectionRule] = TOKEN_SECTIONS,
) -> FormattedBlock:
    """
    Format the tokens of one axis into a :root block.

    Args:
        tokens: Destination tokens (already collapsed)
        dictionary: Token dictionary for reference names
        media_query: "forced-colors", "prefers-contrast" or None for default
        rules: Section rules

    Returns:
        Block CSS ("" if no token applies) and unsectioned tokens
    """
    axis = MEDIA_QUERY_PROPERTY_MAP.get(media_query or "", Axis.DEFAULT)
    resolved = resolve_tokens(tokens, axis, dictionary)
    if not resolved:
        return FormattedBlock()

    declarations, unsectioned = format_variables(resolved, dictionary, rules)
    if not declarations:
        return FormattedBlock(unsectioned=unsectioned)

    if media_query:
        css = f"\n@media ({media_query}) {{\n  :root {{\n{declarations}\n  }}\n}}\n"
    else:
        css = f":root {{\n{declarations}\n}}\n"
    return FormattedBlock(css=css, unsectioned=unsectioned)


def format_stylesheet(
    tokens: Sequence[Token],
    dictionary: TokenDictionary,
    rules: Sequence[SectionRule] = TOKEN_SECTIONS,
) -> FormattedStylesheet:
    """
    Format a destination's tokens into a full stylesheet.

    The license header comes first, then the default block and the
    media-query blocks that are not empty. No "generated file" banner.
    """
    blocks = [format_block(tokens, dictionary, None, rules)]
    blocks.extend(format_block(tokens, dictionary, mq, rules) for mq in MEDIA_QUERY_ORDER)

    css = LICENSE_HEADER + "\n\n" + "".join(block.css for block in blocks)

    unsectioned: list[ResolvedToken] = []
    seen: set[str] = set()
    for block in blocks:
        for token in block.unsectioned:
            if token.name not in seen:
                seen.add(token.name)
                unsectioned.append(token)

    return FormattedStylesheet(css=css, unsectioned=unsectioned)
