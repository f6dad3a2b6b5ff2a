"""
Value resolver - picks the value a token contributes for one axis.

A structured token can hold values per surface (shared, brand,
platform) and per axis (default, forcedColors, prefersContrast). The
resolver returns None when the token has nothing for the requested
combination, which means "skip this token here".
"""

from __future__ import annotations

from typing import Any

from acorn_tokens.constants import Axis, Surface
from acorn_tokens.models.token import Token


def get_original_token_value(
    token: Token,
    axis: Axis | str,
    surface: Surface | str = "",
) -> Any:
    """
    Find the original value of a token for an axis and surface.

    Args:
        token: Token to inspect
        axis: Axis key (default, forcedColors, prefersContrast)
        surface: Surface key, or "" for the top level

    Returns:
        The authored value, or None if absent
    """
    axis_str = axis.value if isinstance(axis, Axis) else axis
    surface_str = surface.value if isinstance(surface, Surface) else surface
    original = token.original_value

    if surface_str:
        if not isinstance(original, dict):
            return None
        nested = original.get(surface_str)
        return nested.get(axis_str) if isinstance(nested, dict) else None

    if not isinstance(original, dict):
        return original if axis_str == Axis.DEFAULT.value else None
    return original.get(axis_str)


def resolve_token_value(token: Token, axis: Axis | str) -> tuple[Any, str]:
    """
    Resolve a token for an axis, falling back to its brand surface.

    Args:
        token: Token to resolve
        axis: Axis key

    Returns:
        (value, surface) where surface is "" or "brand"; value is None
        when the token does not apply
    """
    value = get_original_token_value(token, axis)
    if value is None and token.is_structured:
        return get_original_token_value(token, axis, Surface.BRAND), Surface.BRAND.value
    return value, ""
