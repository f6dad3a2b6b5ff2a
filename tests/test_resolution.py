"""
Tests for value resolution.

Tests cover:
- Axis and surface lookup with the brand fallback
- The light/dark collapse
- Reference rewriting and comment filtering
"""

from acorn_tokens.constants import Axis, Surface
from acorn_tokens.models.token import Token
from acorn_tokens.resolution import (
    clean_comment,
    collapse_light_dark,
    collapse_token,
    display_comment,
    get_original_token_value,
    light_dark,
    needs_light_dark,
    resolve_token_value,
    rewrite_references,
    transform_token,
)
from acorn_tokens.tokens import TokenDictionary


class TestGetOriginalTokenValue:
    """Tests for get_original_token_value."""

    def test_scalar_default_only(self):
        """Scalars only answer the default axis."""
        token = Token(name="space-2", original="2px")
        assert get_original_token_value(token, Axis.DEFAULT) == "2px"
        assert get_original_token_value(token, Axis.FORCED_COLORS) is None
        assert get_original_token_value(token, Axis.DEFAULT, Surface.BRAND) is None

    def test_structured_axes(self):
        """Structured values answer by key."""
        token = Token(name="x", original={"default": "#fff", "forcedColors": "Canvas"})
        assert get_original_token_value(token, Axis.DEFAULT) == "#fff"
        assert get_original_token_value(token, "forcedColors") == "Canvas"
        assert get_original_token_value(token, Axis.PREFERS_CONTRAST) is None

    def test_surface_lookup(self):
        """Surface lookups read the nested mapping."""
        token = Token(name="x", original={"brand": {"default": "#000"}})
        assert get_original_token_value(token, Axis.DEFAULT, Surface.BRAND) == "#000"
        assert get_original_token_value(token, Axis.DEFAULT, "platform") is None


class TestResolveTokenValue:
    """Tests for resolve_token_value."""

    def test_shared_value_wins(self):
        """Top-level value is used before the brand surface."""
        token = Token(name="x", original={"default": "a", "brand": {"default": "b"}})
        assert resolve_token_value(token, Axis.DEFAULT) == ("a", "")

    def test_brand_fallback(self):
        """Missing top-level value falls back to brand."""
        token = Token(name="x", original={"brand": {"default": "b", "forcedColors": "Canvas"}})
        assert resolve_token_value(token, Axis.DEFAULT) == ("b", "brand")
        assert resolve_token_value(token, Axis.FORCED_COLORS) == ("Canvas", "brand")

    def test_not_applicable(self):
        """Axes absent everywhere resolve to None."""
        token = Token(name="x", original={"default": "a"})
        value, _surface = resolve_token_value(token, Axis.PREFERS_CONTRAST)
        assert value is None

    def test_scalar_has_no_fallback(self):
        """Scalars never look at surfaces."""
        token = Token(name="x", original="1px")
        assert resolve_token_value(token, Axis.FORCED_COLORS) == (None, "")

    def test_platform_is_not_a_fallback(self):
        """Only the brand surface is a fallback."""
        token = Token(name="x", original={"platform": {"default": "a"}})
        value, _surface = resolve_token_value(token, Axis.DEFAULT)
        assert value is None


class TestLightDark:
    """Tests for the light/dark collapse."""

    def test_light_dark_format(self):
        assert light_dark("#fff", "#000") == "light-dark(#fff, #000)"

    def test_needs_light_dark(self):
        """Both values must be present and truthy."""
        both = Token(name="x", original={"light": "#fff", "dark": "#000"})
        light_only = Token(name="x", original={"light": "#fff"})
        empty_dark = Token(name="x", original={"light": "#fff", "dark": ""})
        assert needs_light_dark(both, Surface.SHARED) is True
        assert needs_light_dark(light_only, Surface.SHARED) is False
        assert needs_light_dark(empty_dark, Surface.SHARED) is False
        assert needs_light_dark(both, Surface.BRAND) is False

    def test_collapse_shared(self):
        """Shared pairs become the default and the token's value."""
        token = Token(name="x", original={"light": "#fff", "dark": "#000"}, value="old")
        collapsed = collapse_token(token)
        assert collapsed.original_value["default"] == "light-dark(#fff, #000)"
        assert collapsed.original_value["light"] == "#fff"
        assert collapsed.value == "light-dark(#fff, #000)"

    def test_collapse_keeps_references(self):
        """References are collapsed as authored."""
        token = Token(name="x", original={"light": "{color.white}", "dark": "{color.gray.90}"})
        collapsed = collapse_token(token)
        assert collapsed.original_value["default"] == "light-dark({color.white}, {color.gray.90})"

    def test_collapse_brand_and_platform(self):
        """Nested surfaces collapse in place and leave the value alone."""
        token = Token(
            name="x",
            original={
                "brand": {"light": "#a", "dark": "#b"},
                "platform": {"light": "#c", "dark": "#d"},
            },
            value="unchanged",
        )
        collapsed = collapse_token(token)
        assert collapsed.original_value["brand"]["default"] == "light-dark(#a, #b)"
        assert collapsed.original_value["platform"]["default"] == "light-dark(#c, #d)"
        assert collapsed.value == "unchanged"

    def test_collapse_overrides_default(self):
        """A synthesized default replaces an authored one."""
        token = Token(name="x", original={"light": "#fff", "dark": "#000", "default": "red"})
        assert collapse_token(token).original_value["default"] == "light-dark(#fff, #000)"

    def test_collapse_does_not_mutate(self):
        """The input token is untouched."""
        token = Token(name="x", original={"brand": {"light": "#a", "dark": "#b"}})
        collapse_token(token)
        assert token.original_value == {"brand": {"light": "#a", "dark": "#b"}}

    def test_collapse_without_pair_returns_same_token(self):
        token = Token(name="x", original={"light": "#fff"})
        assert collapse_token(token) is token

    def test_collapse_is_idempotent(self):
        """Collapsing twice gives the same values."""
        tokens = [Token(name="x", original={"light": "#fff", "dark": "#000"})]
        once = collapse_light_dark(tokens)
        twice = collapse_light_dark(once)
        assert once[0].original_value == twice[0].original_value

    def test_collapse_keeps_order(self, sample_tokens):
        """Output order follows input order."""
        collapsed = collapse_light_dark(sample_tokens)
        assert [t.name for t in collapsed] == [t.name for t in sample_tokens]


class TestReferences:
    """Tests for reference rewriting."""

    def test_no_reference(self, sample_dictionary: TokenDictionary):
        assert rewrite_references("#fff", sample_dictionary) == "#fff"

    def test_non_string(self, sample_dictionary: TokenDictionary):
        assert rewrite_references(400, sample_dictionary) == "400"

    def test_single_reference(self, sample_dictionary: TokenDictionary):
        assert rewrite_references("{color.white}", sample_dictionary) == "var(--color-white)"

    def test_many_references(self, sample_dictionary: TokenDictionary):
        """Every reference in a composite value is rewritten."""
        result = rewrite_references(
            "{size.item.small} solid {color.gray.90}", sample_dictionary
        )
        assert result == "var(--size-item-small) solid var(--color-gray-90)"

    def test_references_inside_light_dark(self, sample_dictionary: TokenDictionary):
        result = rewrite_references("light-dark({color.white}, {color.gray.90})", sample_dictionary)
        assert result == "light-dark(var(--color-white), var(--color-gray-90))"

    def test_unknown_reference(self, sample_dictionary: TokenDictionary):
        """Unknown references are named from their path and recorded."""
        result = rewrite_references("{color.missingShade}", sample_dictionary)
        assert result == "var(--color-missing-shade)"
        assert "color.missingShade" in sample_dictionary.missing_references


class TestComments:
    """Tests for comment filtering."""

    def test_clean_comment(self):
        assert clean_comment("Page background") == "Page background"
        assert clean_comment("TODO: revisit") is None
        assert clean_comment("") is None
        assert clean_comment(None) is None

    def test_surface_comment_wins(self):
        """A comment on the resolved surface replaces the token comment."""
        token = Token(
            name="x",
            original={"brand": {"default": "#000", "comment": "Brand only"}},
            comment="Token comment",
        )
        assert display_comment(token, "brand") == "Brand only"
        assert display_comment(token, "") == "Token comment"

    def test_transform_token(self, sample_dictionary: TokenDictionary):
        """Transform rewrites the value and drops TODO comments."""
        token = sample_dictionary.get("link-color")
        resolved = transform_token(token, token.original_value, sample_dictionary)
        assert resolved.name == "link-color"
        assert resolved.value == "var(--color-accent-primary)"
        assert resolved.comment is None
