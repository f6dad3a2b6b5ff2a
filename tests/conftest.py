"""
Pytest configuration and shared fixtures.
"""

import copy
import tempfile
from pathlib import Path
from typing import Any

import pytest

from acorn_tokens.models.token import Token
from acorn_tokens.tokens import TokenDictionary, TokenLoader

SAMPLE_DOCUMENT: dict[str, Any] = {
    "color": {
        "blue": {
            "50": {"value": "#0060df"},
            "60": {"value": "#0250bb"},
        },
        "gray": {
            "10": {"value": "#f9f9fb"},
            "90": {"value": "#15141a"},
        },
        "white": {"value": "#ffffff"},
        "accent": {
            "primary": {
                "value": {
                    "light": "{color.blue.50}",
                    "dark": "{color.blue.60}",
                    "forcedColors": "SelectedItem",
                },
            },
        },
    },
    "background": {
        "color": {
            "canvas": {
                "value": {
                    "light": "{color.white}",
                    "dark": "{color.gray.90}",
                    "forcedColors": "Canvas",
                },
                "comment": "Page background",
            },
        },
    },
    "border": {
        "color": {"default": {"value": "#000"}},
        "radius": {
            "medium": {"value": "8px"},
            "small": {"value": "4px"},
        },
        "width": {"value": "1px"},
    },
    "text": {
        "color": {
            "value": {
                "light": "{color.gray.90}",
                "dark": "{color.gray.10}",
                "prefersContrast": "CanvasText",
            },
        },
    },
    "font": {
        "size": {
            "large": {"value": "1.5rem"},
            "small": {"value": "0.875rem"},
        },
        "weight": {"value": 400},
    },
    "heading": {
        "font": {
            "size": {
                "large": {"value": "2rem"},
                "small": {"value": "1rem"},
            },
        },
    },
    "space": {
        "10": {"value": "10px"},
        "2": {"value": "2px"},
    },
    "size": {
        "item": {
            "large": {"value": "32px"},
            "small": {"value": "16px"},
        },
    },
    "box": {
        "shadow": {
            "popup": {"value": "0 2px 6px {color.gray.90}"},
        },
    },
    "button": {
        "background": {
            "color": {
                "active": {"value": "#cfcfd8"},
                "hover": {
                    "value": {
                        "brand": {"light": "#e0e0e6", "dark": "#52525e"},
                    },
                },
            },
        },
        "border": {"radius": {"value": "{border.radius.small}"}},
    },
    "focus": {
        "outline": {
            "color": {"value": "{color.accent.primary}"},
            "width": {"value": "2px"},
        },
    },
    "checkbox": {"size": {"value": "16px"}},
    "icon": {
        "color": {
            "value": {"platform": {"default": "currentColor"}},
        },
    },
    "link": {
        "color": {"value": "{color.accent.primary}", "comment": "TODO: revisit"},
    },
    "attention": {
        "dot": {"color": {"value": "#2ac3a2", "comment": "Unread indicator"}},
    },
}


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A token document touching every destination and axis."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_tokens(sample_document: dict[str, Any]) -> list[Token]:
    """Tokens loaded from the sample document."""
    return TokenLoader().load_document(sample_document)


@pytest.fixture
def sample_dictionary(sample_tokens: list[Token]) -> TokenDictionary:
    """Dictionary over the sample tokens."""
    return TokenDictionary(sample_tokens)
