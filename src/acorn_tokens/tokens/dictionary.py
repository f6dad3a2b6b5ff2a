"""
Token dictionary - lookup and reference handling over a token set.

The dictionary is the collaborator every formatting step talks to:
it detects `{path.to.token}` references, maps them to generated token
names, resolves them to concrete values and formats CSS property lines.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import Any

from acorn_tokens.constants import INDENTATION, DiagnosticMessages, ErrorMessages
from acorn_tokens.errors import TokenReferenceError
from acorn_tokens.models.token import ResolvedToken, Token, TokenReference

logger = logging.getLogger(__name__)

REFERENCE_PATTERN = re.compile(r"\{([^{}]+)\}")

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_LETTER_DIGIT = re.compile(r"([a-zA-Z])(\d)")
_DIGIT_LETTER = re.compile(r"(\d)([a-zA-Z])")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def kebab_case(parts: Iterable[str]) -> str:
    """
    Build a kebab-case name from path segments.

    Words break at case changes and between letters and digits.

    Example:
        kebab_case(["color", "backgroundColor", "10"]) -> "color-background-color-10"
        kebab_case(["size", "item10"]) -> "size-item-10"
    """
    words = []
    for part in parts:
        spaced = _CAMEL_BOUNDARY.sub(r"\1-\2", str(part))
        spaced = _LETTER_DIGIT.sub(r"\1-\2", spaced)
        spaced = _DIGIT_LETTER.sub(r"\1-\2", spaced)
        word = _NON_ALNUM.sub("-", spaced).strip("-").lower()
        if word:
            words.append(word)
    return "-".join(words)


class TokenDictionary:
    """
    Read-only view over a token set with reference support.

    Unknown references are remembered in `missing_references` so the
    build can report them.
    """

    def __init__(self, tokens: Sequence[Token]):
        """
        Initialize the dictionary.

        Args:
            tokens: All tokens of the document, in document order
        """
        self.all_tokens: list[Token] = list(tokens)
        self._by_path: dict[tuple[str, ...], Token] = {}
        self._by_name: dict[str, Token] = {}
        for token in self.all_tokens:
            if token.path:
                self._by_path[tuple(token.path)] = token
            self._by_name[token.name] = token
        self.missing_references: set[str] = set()

    def __len__(self) -> int:
        return len(self.all_tokens)

    def get(self, name: str) -> Token | None:
        """Get a token by its generated name."""
        return self._by_name.get(name)

    def get_by_path(self, path: Sequence[str]) -> Token | None:
        """Get a token by its document path."""
        return self._by_path.get(tuple(path))

    def uses_reference(self, value: Any) -> bool:
        """Check whether a value (or any nested value) contains a reference."""
        if isinstance(value, str):
            return REFERENCE_PATTERN.search(value) is not None
        if isinstance(value, dict):
            return any(self.uses_reference(v) for v in value.values())
        if isinstance(value, list):
            return any(self.uses_reference(v) for v in value)
        return False

    def get_references(self, value: Any) -> list[TokenReference]:
        """
        List the references inside a string value.

        A reference that does not match any token still gets a name derived
        from its path.
        """
        if not isinstance(value, str):
            return []

        references: list[TokenReference] = []
        for match in REFERENCE_PATTERN.finditer(value):
            path = tuple(match.group(1).strip().split("."))
            token = self.get_by_path(path)
            if token is None:
                joined = ".".join(path)
                if joined not in self.missing_references:
                    logger.warning(DiagnosticMessages.UNKNOWN_REFERENCE.format(path=joined))
                self.missing_references.add(joined)
                name = kebab_case(path)
            else:
                name = token.name
            references.append(TokenReference(path=path, name=name))
        return references

    def resolve_value(self, value: Any, chain: tuple[str, ...] = ()) -> Any:
        """
        Replace references with the concrete values they point at.

        A string that is exactly one reference resolves to the referenced
        value as-is, so numbers stay numbers. Mappings are resolved leaf
        by leaf.

        Raises:
            TokenReferenceError: On a reference cycle
        """
        if isinstance(value, dict):
            return {k: self.resolve_value(v, chain) for k, v in value.items()}
        if isinstance(value, list):
            return [self.resolve_value(v, chain) for v in value]
        if not isinstance(value, str) or not self.uses_reference(value):
            return value

        whole = REFERENCE_PATTERN.fullmatch(value.strip())
        if whole:
            return self._resolve_path(whole.group(1), chain)

        def substitute(match: re.Match[str]) -> str:
            return str(self._resolve_path(match.group(1), chain))

        return REFERENCE_PATTERN.sub(substitute, value)

    def _resolve_path(self, raw_path: str, chain: tuple[str, ...]) -> Any:
        """Resolve one reference path, following nested references."""
        path_str = raw_path.strip()
        if path_str in chain:
            raise TokenReferenceError(
                ErrorMessages.CIRCULAR_REFERENCE.format(
                    name=chain[0],
                    chain=" -> ".join((*chain, path_str)),
                )
            )

        token = self.get_by_path(path_str.split("."))
        if token is None:
            # Left in place; the CSS output rewrites it to a var() anyway
            return "{" + path_str + "}"
        return self.resolve_value(token.original_value, (*chain, path_str))

    def format_property(self, token: ResolvedToken, indentation: str = INDENTATION) -> str:
        """
        Format a resolved token as a CSS custom property line.

        Example:
            "  --color-accent: var(--color-blue-50); /* Primary accent */"
        """
        line = f"{indentation}--{token.name}: {token.value};"
        if token.comment:
            line += f" /* {token.comment} */"
        return line
