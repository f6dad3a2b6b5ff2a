"""
Token models - named design values with axis-specific variants.

A token's original value is either a scalar or a nested mapping keyed by
surface (shared/brand/platform) and axis (light/dark/default,
forcedColors/prefersContrast).
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from acorn_tokens.constants import SHARED_OR_BRAND_KEYS, Surface


class Token(BaseModel):
    """
    A named design value.

    Tokens are immutable; passes that need a different value work on
    `copy_original_value()` and build a new token.
    """

    name: str = Field(..., description="Kebab-case identifier used for the CSS property")
    path: tuple[str, ...] = Field(default=(), description="Key path in the source document")
    value: Any = Field(None, description="Resolved value used outside of CSS custom properties")
    original_value: Any = Field(
        None,
        alias="original",
        description="Scalar or nested surface/axis mapping as authored",
    )
    comment: str | None = Field(None, description="Free text comment")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_structured(self) -> bool:
        """Whether the original value is a surface/axis mapping."""
        return isinstance(self.original_value, dict)

    @property
    def is_platform_only(self) -> bool:
        """A token defined for the platform surface and nothing else."""
        if not self.is_structured:
            return False
        return bool(self.original_value.get(Surface.PLATFORM.value)) and len(self.original_value) == 1

    @property
    def has_shared_or_brand(self) -> bool:
        """Whether a brand, light, dark or default value sits at the top level."""
        if not self.is_structured:
            return False
        return any(self.original_value.get(key) for key in SHARED_OR_BRAND_KEYS)

    def surface_value(self, surface: Surface | str) -> dict[str, Any] | None:
        """
        Get the axis mapping stored at a surface.

        The shared surface is the top level of the value object.
        """
        if not self.is_structured:
            return None
        surface_str = surface.value if isinstance(surface, Surface) else surface
        if surface_str in ("", Surface.SHARED.value):
            return self.original_value
        nested = self.original_value.get(surface_str)
        return nested if isinstance(nested, dict) else None

    def copy_original_value(self) -> Any:
        """Deep copy of the original value, safe to modify."""
        return copy.deepcopy(self.original_value)


class ResolvedToken(BaseModel):
    """
    A token ready for emission.

    The value has its references rewritten to var() calls and the comment
    has been filtered.
    """

    name: str
    value: str
    comment: str | None = None
    surface: str = Field("", description="Surface the value was resolved from")

    model_config = {"frozen": True}


@dataclass(frozen=True)
class TokenReference:
    """A `{path.to.token}` reference found inside a value."""

    path: tuple[str, ...]
    name: str

    @property
    def placeholder(self) -> str:
        """The reference as written in the source value."""
        return "{" + ".".join(self.path) + "}"
