"""
Destination filters - which tokens belong in which stylesheet.

Each destination has a hand-written name predicate. Name predicates
encode their own precedence (e.g. button colors are excluded from the
colors file and claimed by the inputs file). On top of the name test,
every destination applies the same axis-presence rule to structured
tokens.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from acorn_tokens.models.token import Token

NamePredicate = Callable[[str], bool]

# Shared format name for every destination
SIMPLE_CSS_FORMAT = "css/variables/simple"


def _is_input_name(name: str) -> bool:
    return "button-" in name or "checkbox-" in name or "input-" in name


def is_color_token(name: str) -> bool:
    """Colors: palettes and every *-color token not owned by shadows or buttons."""
    if "shadow" in name and "color" in name:
        return False
    if "button-" in name and "color" in name:
        return False

    return (
        name.startswith(
            (
                "color-",
                "background-color",
                "border-color",
                "text-color",
                "icon-color",
                "link-color",
                "link-",
                "table-",
                "outline-color",
            )
        )
        or "-color" in name
        or name in ("attention-dot-color", "focus-outline-color")
        or ("checkbox-" in name and "color" in name)
        or ("input-" in name and "color" in name)
        or (name.startswith("icon-") and "color" in name)
    )


def is_typography_token(name: str) -> bool:
    """Typography: font, heading and non-color text tokens."""
    if _is_input_name(name):
        return False

    return (
        "font-" in name
        or name.startswith("heading-")
        or (name.startswith("text-") and "color" not in name)
    )


def is_space_token(name: str) -> bool:
    """Spacing: space, padding and margin tokens."""
    if _is_input_name(name):
        return False

    return (
        name.startswith(("space-", "padding-", "margin-"))
        or "-space" in name
        or "-padding" in name
        or "-margin" in name
    )


def is_size_token(name: str) -> bool:
    """Sizing: size, width and height tokens outside of inputs and typography."""
    if name.startswith("button-"):
        return False
    if "font-size" in name:
        return False

    is_size = (
        name.startswith(("size-", "width-", "height-", "icon-size", "page-"))
        or "-size" in name
        or "-width" in name
        or "-height" in name
        or "page-" in name
        or ("button-size" in name and "color" not in name)
    )
    if not is_size:
        return False

    if "border-width" in name:
        return False

    is_input_related = "button" in name or "checkbox" in name or "input" in name
    has_dimension = any(part in name for part in ("-size", "-width", "-height", "font-size"))
    if is_input_related and not has_dimension:
        return False

    return not name.startswith(("checkbox-", "input-"))


def is_border_token(name: str) -> bool:
    """Borders: border tokens except colors and input borders."""
    if "button" in name or "checkbox" in name or "input" in name:
        return False

    return (name.startswith("border-") or "-border" in name) and "-color" not in name


def is_shadow_token(name: str) -> bool:
    """Shadows: anything mentioning shadow, including shadow colors."""
    return "shadow" in name


def is_input_token(name: str) -> bool:
    """Inputs: buttons (colors included), checkboxes, text inputs and focus outlines."""
    is_input = _is_input_name(name) or (
        name.startswith("focus-outline") and "-color" not in name
    )
    if not is_input:
        return False

    return not ("-color" in name and "button-" not in name)


def has_renderable_axes(token: Token) -> bool:
    """
    Axis-presence rule shared by every destination.

    Scalar tokens always pass. Structured tokens pass when they carry a
    brand, light, dark or default value at the top level, or when they
    are not platform-only.
    """
    if not token.is_structured:
        return True
    return token.has_shared_or_brand or not token.is_platform_only


@dataclass(frozen=True)
class Destination:
    """An output stylesheet and the tokens it selects."""

    key: str
    filename: str
    name_filter: NamePredicate
    format: str = SIMPLE_CSS_FORMAT

    def accepts(self, token: Token) -> bool:
        """Check whether the token belongs in this stylesheet."""
        return self.name_filter(token.name) and has_renderable_axes(token)

    def path(self, prefix: str = "") -> str:
        """Destination path relative to the output directory."""
        return f"{prefix}/{self.filename}" if prefix else self.filename


# Output order
DESTINATIONS: tuple[Destination, ...] = (
    Destination("colors", "acorn-colors.css", is_color_token),
    Destination("typography", "acorn-typography.css", is_typography_token),
    Destination("spacing", "acorn-space.css", is_space_token),
    Destination("sizing", "acorn-size.css", is_size_token),
    Destination("borders", "acorn-borders.css", is_border_token),
    Destination("shadows", "acorn-shadows.css", is_shadow_token),
    Destination("inputs", "acorn-inputs.css", is_input_token),
)

# Claim order when several destinations accept the same token: first wins.
CLAIM_PRIORITY: tuple[str, ...] = (
    "inputs",
    "shadows",
    "colors",
    "borders",
    "typography",
    "spacing",
    "sizing",
)


def get_destination(key_or_filename: str) -> Destination | None:
    """Look a destination up by key ("colors") or file name ("acorn-colors.css")."""
    for destination in DESTINATIONS:
        if key_or_filename in (destination.key, destination.filename):
            return destination
    return None
