"""
Section grouper - orders tokens into labelled sections.

Sections are an ordered rule list: the first rule whose matcher fits a
token's normalized name claims the token. Inside a section, tokens sort
by base name, with size and state suffixes ordered by their scale
instead of alphabetically.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Generic, Protocol, TypeVar

from acorn_tokens.constants import INDENTATION, STATE_ORDER, TSHIRT_ORDER

BASE_SUFFIX_PATTERN = re.compile(r"(\w+)-base\b")
_DIGITS = re.compile(r"(\d+)")

Matcher = str | re.Pattern[str]


class Named(Protocol):
    """Anything with a token name."""

    @property
    def name(self) -> str: ...


T = TypeVar("T", bound=Named)


@dataclass(frozen=True)
class SectionRule:
    """A labelled section and the name prefixes or patterns it claims."""

    label: str
    matchers: tuple[Matcher, ...]

    def matches(self, name: str) -> bool:
        """Check whether a normalized token name belongs to this section."""
        for matcher in self.matchers:
            if isinstance(matcher, re.Pattern):
                if matcher.search(name):
                    return True
            elif name.startswith(matcher):
                return True
        return False

    @property
    def label_parts(self) -> list[str]:
        """Heading path; '/' nests a label under its parent."""
        return self.label.split("/")


def section(label: str, *matchers: Matcher) -> SectionRule:
    """Shorthand for declaring a SectionRule."""
    return SectionRule(label=label, matchers=matchers)


# Order matters: it is both claim priority and output order.
TOKEN_SECTIONS: tuple[SectionRule, ...] = (
    section("Attention Dot", "attention-dot"),
    section("Background Color", "background-color"),
    section("Border", "border"),
    section("Box Shadow", "box-shadow"),
    section("Button", "button"),
    section("Checkbox", "checkbox"),
    section("Color", "brand-color", "color", "platform-color"),
    section("Focus Outline", "focus-outline"),
    section("Font Size", "font-size"),
    section("Font Weight", "font-weight"),
    section("Heading", "heading"),
    section("Icon", "icon"),
    section("Input - Text", "input-text"),
    section("Input - Space", "input-space"),
    section("Link", "link"),
    section("Outline Color", "outline-color"),
    section("Page", "page"),
    section("Size", "size"),
    section("Space", "space"),
    section("Table Row", "table-row"),
    section("Text", "text"),
    section("Unspecified", ""),
)


@dataclass
class TokenSection(Generic[T]):
    """Tokens claimed by one section, already sorted."""

    rule: SectionRule
    tokens: list[T] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.rule.label


@dataclass
class GroupedTokens(Generic[T]):
    """Result of grouping: non-empty sections in order, plus leftovers."""

    sections: list[TokenSection[T]] = field(default_factory=list)
    unsectioned: list[T] = field(default_factory=list)

    def ordered_tokens(self) -> list[T]:
        """All sectioned tokens in output order."""
        return [token for sec in self.sections for token in sec.tokens]


def normalize_token_name(name: str) -> str:
    """
    Strip `-base` segments used for default variants.

    Example:
        normalize_token_name("color-accent-base") -> "color-accent"
    """
    return BASE_SUFFIX_PATTERN.sub(r"\1", name)


def token_parts(name: str) -> tuple[str, str]:
    """
    Split a name into (base, suffix) when its last segment is a known scale step.

    Example:
        token_parts("button-padding-small") -> ("button-padding", "small")
        token_parts("button-padding") -> ("button-padding", "")
    """
    last_dash = name.rfind("-")
    suffix = name[last_dash + 1 :]
    if suffix in TSHIRT_ORDER or suffix in STATE_ORDER:
        return (name[:last_dash] if last_dash >= 0 else "", suffix)
    return (name, "")


def _natural_key(text: str) -> list[str | int]:
    """Sort key comparing digit runs numerically (size-2 before size-10)."""
    chunks = _DIGITS.split(text.casefold())
    return [int(chunk) if i % 2 else chunk for i, chunk in enumerate(chunks)]


def locale_compare(a: str, b: str) -> int:
    """Numeric-aware, case-insensitive string comparison."""
    a_key, b_key = _natural_key(a), _natural_key(b)
    if a_key != b_key:
        return -1 if a_key < b_key else 1
    if a != b:
        return -1 if a < b else 1
    return 0


def compare_token_names(a: str, b: str) -> int:
    """
    Compare two token names for output order.

    Names sharing a base compare by size scale, then state scale; all
    other pairs compare by base name.
    """
    a_base, a_suffix = token_parts(normalize_token_name(a))
    b_base, b_suffix = token_parts(normalize_token_name(b))

    if (a_suffix or b_suffix) and a_base == b_base:
        if a_suffix in TSHIRT_ORDER and b_suffix in TSHIRT_ORDER:
            return TSHIRT_ORDER.index(a_suffix) - TSHIRT_ORDER.index(b_suffix)
        if a_suffix in STATE_ORDER and b_suffix in STATE_ORDER:
            return STATE_ORDER.index(a_suffix) - STATE_ORDER.index(b_suffix)

    return locale_compare(a_base, b_base)


def sort_tokens(tokens: Sequence[T]) -> list[T]:
    """Sort tokens within a section (stable)."""
    return sorted(tokens, key=cmp_to_key(lambda a, b: compare_token_names(a.name, b.name)))


def group_tokens(
    tokens: Sequence[T],
    rules: Sequence[SectionRule] = TOKEN_SECTIONS,
) -> GroupedTokens[T]:
    """
    Partition tokens into ordered sections.

    Args:
        tokens: Tokens to group, in document order
        rules: Section rules in priority order

    Returns:
        Non-empty sections in rule order and the tokens no rule claimed
    """
    grouped: GroupedTokens[T] = GroupedTokens()
    remaining = list(tokens)

    for rule in rules:
        claimed: list[T] = []
        unclaimed: list[T] = []
        for token in remaining:
            target = claimed if rule.matches(normalize_token_name(token.name)) else unclaimed
            target.append(token)
        remaining = unclaimed

        if claimed:
            grouped.sections.append(TokenSection(rule=rule, tokens=sort_tokens(claimed)))

    grouped.unsectioned = remaining
    return grouped


def heading_lines(
    label_parts: Sequence[str],
    previous_parts: Sequence[str],
    indentation: str = INDENTATION,
) -> list[str]:
    """
    Comment headings for the label segments that changed since the last section.

    Example:
        heading_lines(["Input - Text"], ["Icon"]) -> ["  /** Input - Text **/"]
    """
    lines: list[str] = []
    level = "**"
    for i, part in enumerate(label_parts):
        if i >= len(previous_parts) or part != previous_parts[i]:
            lines.append(f"{indentation}/{level} {part} {level}/")
        level += "*"
    return lines


def format_sections(
    grouped: GroupedTokens[T],
    format_token: Callable[[T], str],
    indentation: str = INDENTATION,
) -> list[str]:
    """
    Render grouped tokens as lines with section headings.

    Every section after the first is preceded by a blank line.
    """
    lines: list[str] = []
    previous: list[str] = []
    for index, sec in enumerate(grouped.sections):
        if index:
            lines.append("")
        parts = sec.rule.label_parts
        lines.extend(heading_lines(parts, previous, indentation))
        previous = parts
        lines.extend(format_token(token) for token in sec.tokens)
    return lines
