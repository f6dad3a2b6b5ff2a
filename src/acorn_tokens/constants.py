"""
Constants and enums for the token build.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class Axis(str, Enum):
    """
    Resolution axis for a token value.

    The default axis lands in the unconditional :root block, the other
    two in their media-query blocks.
    """

    DEFAULT = "default"
    FORCED_COLORS = "forcedColors"
    PREFERS_CONTRAST = "prefersContrast"


class Surface(str, Enum):
    """Provenance of a value inside a structured token."""

    SHARED = "shared"  # Top level of the value object
    BRAND = "brand"
    PLATFORM = "platform"


# Media query -> axis key in the token's value object
MEDIA_QUERY_PROPERTY_MAP: dict[str, Axis] = {
    "forced-colors": Axis.FORCED_COLORS,
    "prefers-contrast": Axis.PREFERS_CONTRAST,
}

# Emission order of the media-query blocks after the :root block
MEDIA_QUERY_ORDER: tuple[str, ...] = ("forced-colors", "prefers-contrast")

# Surfaces collapsed to light-dark(), in registration order
LIGHT_DARK_SURFACES: tuple[Surface, ...] = (
    Surface.SHARED,
    Surface.PLATFORM,
    Surface.BRAND,
)

# Size scale used as a sort tie-break
TSHIRT_ORDER: tuple[str, ...] = (
    "circle",
    "xxxsmall",
    "xxsmall",
    "xsmall",
    "small",
    "medium",
    "large",
    "xlarge",
    "xxlarge",
    "xxxlarge",
)

# State scale used as a sort tie-break
STATE_ORDER: tuple[str, ...] = (
    "base",
    "default",
    "root",
    "hover",
    "active",
    "focus",
    "disabled",
)

# Top-level keys that mark a structured token as renderable
SHARED_OR_BRAND_KEYS: tuple[str, ...] = ("brand", "light", "dark", "default")

LICENSE_HEADER = "\n".join(
    [
        "/* This Source Code Form is subject to the terms of the Mozilla Public",
        " * License, v. 2.0. If a copy of the MPL was not distributed with this",
        " * file, You can obtain one at http://mozilla.org/MPL/2.0/. */",
    ]
)

# Marker for authoring notes that must not reach generated CSS
TODO_MARKER = "TODO"

INDENTATION = "  "

DEFAULT_PREFIX = "acorn-tokens"

# Token document formats understood by the loader
SUPPORTED_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")

DiagnosticSeverity = Literal["warning", "error"]


class ErrorMessages:
    """Standardized error messages."""

    SOURCE_NOT_FOUND = "Token source not found: {path}"
    CONFIG_NOT_FOUND = "Build configuration not found: {path}"
    INVALID_CONFIG = "Build configuration must be a mapping at the top level: {path}"
    UNSUPPORTED_FORMAT = "Unsupported token source format: '{suffix}'. Expected one of {expected}."
    INVALID_DOCUMENT = "Token document must be a mapping at the top level: {path}"
    CIRCULAR_REFERENCE = "Circular reference detected while resolving '{name}': {chain}"
    UNKNOWN_DESTINATION = "Destination '{destination}' not found."
    TOKEN_NOT_FOUND = "Token '{name}' not found."
    PARTITION_FAILED = "Token partition is not exact: {count} problem(s) found."
    BUILD_FAILED = "Build failed with error diagnostics; no files written."


class DiagnosticMessages:
    """Standardized diagnostic messages."""

    UNCLAIMED = "Token '{name}' is not claimed by any destination."
    OVERLAP = "Token '{name}' is claimed by {destinations}; assigned to '{winner}'."
    UNSECTIONED = "Token '{name}' in '{destination}' matches no section and is omitted."
    UNKNOWN_REFERENCE = "Reference '{{{path}}}' does not resolve to a known token."


class SuccessMessages:
    """Standardized success messages."""

    BUILD_COMPLETE = "Built {count} file(s) from {tokens} token(s)."
    FILE_WRITTEN = "Wrote {path}."
