"""
Value resolution - from authored value objects to CSS values.

Resolution runs in three steps:
1. Collapse light/dark pairs into light-dark() defaults (once per build)
2. Pick the value for an axis, falling back to the brand surface
3. Rewrite token references to var() calls
"""

from acorn_tokens.resolution.light_dark import (
    collapse_light_dark,
    collapse_token,
    light_dark,
    needs_light_dark,
)
from acorn_tokens.resolution.references import (
    clean_comment,
    display_comment,
    rewrite_references,
    transform_token,
)
from acorn_tokens.resolution.value import get_original_token_value, resolve_token_value

__all__ = [
    "clean_comment",
    "collapse_light_dark",
    "collapse_token",
    "display_comment",
    "get_original_token_value",
    "light_dark",
    "needs_light_dark",
    "resolve_token_value",
    "rewrite_references",
    "transform_token",
]
