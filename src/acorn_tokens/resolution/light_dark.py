"""
Light/dark collapser.

Tokens that carry both a light and a dark value at a surface get a
synthesized `light-dark(<light>, <dark>)` default at that surface. The
pass returns new tokens; the input tokens are left as they were, so
every destination sees the same view no matter the build order.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from acorn_tokens.constants import LIGHT_DARK_SURFACES, Axis, Surface
from acorn_tokens.models.token import Token

LIGHT = "light"
DARK = "dark"


def light_dark(light: Any, dark: Any) -> str:
    """Format a light-dark() CSS value."""
    return f"light-dark({light}, {dark})"


def needs_light_dark(token: Token, surface: Surface) -> bool:
    """Check whether a token has both light and dark values at a surface."""
    values = token.surface_value(surface)
    if values is None:
        return False
    return bool(values.get(LIGHT)) and bool(values.get(DARK))


def collapse_token(token: Token) -> Token:
    """
    Collapse light/dark pairs of a single token into defaults.

    For the shared surface the token's scalar value becomes the
    light-dark() value too; other surfaces leave it unchanged.

    Args:
        token: Token to collapse

    Returns:
        The same token if nothing qualifies, otherwise a new token
    """
    surfaces = [s for s in LIGHT_DARK_SURFACES if needs_light_dark(token, s)]
    if not surfaces:
        return token

    original = token.copy_original_value()
    value = token.value
    for surface in surfaces:
        target = original if surface == Surface.SHARED else original[surface.value]
        collapsed = light_dark(target[LIGHT], target[DARK])
        target[Axis.DEFAULT.value] = collapsed
        if surface == Surface.SHARED:
            value = collapsed

    return token.model_copy(update={"original_value": original, "value": value})


def collapse_light_dark(tokens: Iterable[Token]) -> list[Token]:
    """
    Run the collapse over a whole token set.

    Args:
        tokens: Tokens in document order

    Returns:
        New token list in the same order
    """
    return [collapse_token(token) for token in tokens]
