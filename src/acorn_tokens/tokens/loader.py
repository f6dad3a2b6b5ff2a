"""
Token loader - reads a design-token document into Token objects.

Documents are nested JSON or YAML trees in the style-dictionary shape:
any mapping that has a `value` key is a token, and the chain of keys
leading to it is its path.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from acorn_tokens.constants import SUPPORTED_SUFFIXES, ErrorMessages
from acorn_tokens.errors import TokenLoadError
from acorn_tokens.models.token import Token
from acorn_tokens.tokens.dictionary import TokenDictionary, kebab_case

logger = logging.getLogger(__name__)

VALUE_KEY = "value"
COMMENT_KEY = "comment"


class TokenLoader:
    """
    Loads token documents from disk or from already-parsed data.

    Scalar token values have their references resolved; the authored
    value is kept untouched as the token's original value.
    """

    def __init__(self, source_path: Path | None = None):
        """
        Initialize the token loader.

        Args:
            source_path: Default token document to load
        """
        self.source_path = source_path

    def load(self, path: Path | None = None) -> list[Token]:
        """
        Load tokens from a JSON or YAML document.

        Args:
            path: Document path (defaults to the configured source)

        Returns:
            Tokens in document order

        Raises:
            TokenLoadError: If the file is missing, unreadable or malformed
        """
        path = path or self.source_path
        if path is None or not path.exists():
            raise TokenLoadError(ErrorMessages.SOURCE_NOT_FOUND.format(path=path))

        suffix = path.suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise TokenLoadError(
                ErrorMessages.UNSUPPORTED_FORMAT.format(
                    suffix=suffix, expected=", ".join(SUPPORTED_SUFFIXES)
                )
            )

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f) if suffix == ".json" else yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise TokenLoadError(f"Failed to read token document {path}: {e}") from e

        if not isinstance(data, dict):
            raise TokenLoadError(ErrorMessages.INVALID_DOCUMENT.format(path=path))

        tokens = self.load_document(data)
        logger.debug("Loaded %d tokens from %s", len(tokens), path)
        return tokens

    def load_document(self, data: dict[str, Any]) -> list[Token]:
        """
        Build tokens from a parsed token tree.

        Args:
            data: Nested token document

        Returns:
            Tokens in document order, with resolved values
        """
        raw_tokens = [
            Token(
                name=kebab_case(path),
                path=path,
                original=node[VALUE_KEY],
                comment=node.get(COMMENT_KEY),
            )
            for path, node in self._walk(data, ())
        ]

        dictionary = TokenDictionary(raw_tokens)
        return [
            token.model_copy(
                update={
                    "value": dictionary.resolve_value(
                        token.original_value, (".".join(token.path),)
                    )
                }
            )
            for token in raw_tokens
        ]

    def _walk(
        self, node: dict[str, Any], path: tuple[str, ...]
    ) -> list[tuple[tuple[str, ...], dict[str, Any]]]:
        """Collect (path, token node) pairs depth-first in document order."""
        found: list[tuple[tuple[str, ...], dict[str, Any]]] = []
        for key, child in node.items():
            if not isinstance(child, dict):
                continue
            child_path = (*path, str(key))
            if VALUE_KEY in child:
                found.append((child_path, child))
            else:
                found.extend(self._walk(child, child_path))
        return found
