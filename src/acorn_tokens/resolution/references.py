"""
Reference rewriter and token transform.

Turns an authored value into the value that appears in the CSS custom
property: `{path.to.token}` references become `var(--token-name)` and
authoring notes are stripped from comments.
"""

from __future__ import annotations

import re
from typing import Any

from acorn_tokens.constants import TODO_MARKER
from acorn_tokens.models.token import ResolvedToken, Token
from acorn_tokens.tokens.dictionary import REFERENCE_PATTERN, TokenDictionary

COMMENT_KEY = "comment"


def rewrite_references(value: Any, dictionary: TokenDictionary) -> str:
    """
    Rewrite every token reference in a value to CSS variable syntax.

    Args:
        value: Authored value (non-strings are stringified)
        dictionary: Token dictionary used to name references

    Returns:
        The value with `{a.b}` replaced by `var(--a-b)`

    Example:
        rewrite_references("{size.1} solid {color.gray.60}", dictionary)
        -> "var(--size-1) solid var(--color-gray-60)"
    """
    text = str(value)
    if not dictionary.uses_reference(text):
        return text

    names = {ref.placeholder: ref.name for ref in dictionary.get_references(text)}

    def to_var(match: re.Match[str]) -> str:
        return f"var(--{names['{' + match.group(1).strip() + '}']})"

    return REFERENCE_PATTERN.sub(to_var, text)


def clean_comment(comment: str | None) -> str | None:
    """Drop comments that are authoring notes (starting with TODO)."""
    if comment and comment.startswith(TODO_MARKER):
        return None
    return comment or None


def display_comment(token: Token, surface: str = "") -> str | None:
    """
    Pick the comment shown next to a token.

    A comment stored on the surface the value came from wins over the
    token's own comment.
    """
    surface_comment = None
    if surface:
        values = token.surface_value(surface)
        if values is not None:
            surface_comment = values.get(COMMENT_KEY)
    return clean_comment(surface_comment if surface_comment is not None else token.comment)


def transform_token(
    token: Token,
    original_value: Any,
    dictionary: TokenDictionary,
    surface: str = "",
) -> ResolvedToken:
    """
    Build the emitted form of a token from its resolved original value.

    Args:
        token: Source token
        original_value: Value picked by the resolver
        dictionary: Token dictionary for reference names
        surface: Surface the value came from

    Returns:
        ResolvedToken with rewritten value and filtered comment
    """
    return ResolvedToken(
        name=token.name,
        value=rewrite_references(original_value, dictionary),
        comment=display_comment(token, surface),
        surface=surface,
    )
