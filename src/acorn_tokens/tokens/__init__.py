"""
Token sources - loading documents and looking tokens up.

The dictionary is the reference-aware view every formatting step uses.
"""

from acorn_tokens.tokens.dictionary import (
    REFERENCE_PATTERN,
    TokenDictionary,
    kebab_case,
)
from acorn_tokens.tokens.loader import TokenLoader

__all__ = [
    "REFERENCE_PATTERN",
    "TokenDictionary",
    "TokenLoader",
    "kebab_case",
]
