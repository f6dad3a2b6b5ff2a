"""
Destinations - the seven topical stylesheets and how tokens reach them.
"""

from acorn_tokens.destinations.filters import (
    CLAIM_PRIORITY,
    DESTINATIONS,
    Destination,
    get_destination,
    has_renderable_axes,
    is_border_token,
    is_color_token,
    is_input_token,
    is_shadow_token,
    is_size_token,
    is_space_token,
    is_typography_token,
)
from acorn_tokens.destinations.partition import (
    PartitionReport,
    matching_destinations,
    partition_tokens,
)

__all__ = [
    "CLAIM_PRIORITY",
    "DESTINATIONS",
    "Destination",
    "PartitionReport",
    "get_destination",
    "has_renderable_axes",
    "is_border_token",
    "is_color_token",
    "is_input_token",
    "is_shadow_token",
    "is_size_token",
    "is_space_token",
    "is_typography_token",
    "matching_destinations",
    "partition_tokens",
]
