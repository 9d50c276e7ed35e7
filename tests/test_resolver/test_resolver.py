"""Tests for the resolver: variants + matcher + hook application."""

import logging

import pytest

import mingled
from mingled.errors import UnresolvedTokenError
from mingled.model import Resolution, Rewrite
from mingled.resolver import Resolver, resolve
from mingled.rules import rule
from mingled.theme import Theme


# ---------------------------------------------------------------------------
# Plain tokens
# ---------------------------------------------------------------------------


class TestResolvePlain:
    def test_declaration_and_selector(self):
        result = resolve("h:full")
        assert isinstance(result, Resolution)
        assert result.declaration == {"height": "100%"}
        assert result.selector == r".h\:full"
        assert result.parent is None
        assert result.rule == "height"

    def test_spec_examples(self):
        assert resolve("h:200").declaration == {"height": "200px"}
        assert resolve("h:50%").declaration == {"height": "50%"}
        assert resolve("c:#fff/50").declaration == {
            "color": "color-mix(in srgb, #fff 50%, transparent)"
        }
        assert resolve("m:8|0").declaration == {"margin": "0.5rem 0rem"}
        assert resolve("r:4|8").declaration == {"border-radius": "4px 8px 4px 8px"}

    def test_unknown_token(self):
        assert resolve("totally-unknown-token") is None

    def test_package_level_resolve(self):
        assert mingled.resolve("bold").declaration == {"font-weight": "bold"}

    def test_idempotent(self):
        first = resolve("c:red:hover@md!")
        second = resolve("c:red:hover@md!")
        assert first == second
        assert first.declaration.to_dict() == second.declaration.to_dict()


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class TestResolveVariants:
    def test_all_variants_compose(self):
        result = resolve("c:red:hover@md!")
        assert result.token == "c:red:hover@md!"
        assert result.rule == "color"
        assert result.declaration == {"color": "var(--color-red, red) !important"}
        assert result.selector == r".c\:red\:hover\@md\!:hover"
        assert result.parent == "@media (min-width: 768px)"

    def test_pseudo_only(self):
        result = resolve("bg:blue:focus-within")
        assert result.declaration == {"background-color": "var(--color-blue, blue)"}
        assert result.selector.endswith(":focus-within")
        assert result.parent is None

    def test_important_applies_to_whole_declaration(self):
        result = resolve("mx:8!")
        assert result.declaration == {
            "margin-left": "0.5rem !important",
            "margin-right": "0.5rem !important",
        }

    def test_important_leaves_unset_values(self):
        result = resolve("abs:10!")
        assert result.declaration["top"] == "10px !important"
        assert result.declaration["left"] is None

    def test_responsive_only(self):
        result = resolve("w:full@xl")
        assert result.declaration == {"width": "100%"}
        assert result.parent == "@media (min-width: 1280px)"

    def test_variant_on_unknown_base(self):
        assert resolve("nope:hover!") is None

    def test_variant_suffix_alone(self):
        assert resolve("!") is None
        assert resolve(":hover") is None


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class TestResolverConfig:
    def test_alternate_theme(self):
        resolver = Resolver(theme=Theme(breakpoints={"md": "800px"}))
        assert resolver.resolve("p:4@md").parent == "@media (min-width: 800px)"

    def test_theme_without_breakpoint_leaves_suffix(self):
        resolver = Resolver(theme=Theme(breakpoints={}))
        # "@md" is not stripped, so "c:" captures "red@md" verbatim.
        result = resolver.resolve("c:red@md")
        assert result.parent is None
        assert result.declaration == {"color": "var(--color-red@md, red@md)"}

    def test_custom_rules(self):
        resolver = Resolver(rules=[rule("brand", r"^brand$", lambda: {"color": "hotpink"})])
        assert resolver.resolve("brand!").declaration == {"color": "hotpink !important"}
        assert resolver.resolve("h:full") is None

    def test_custom_variants(self):
        def dark(token, theme):
            if token.startswith("dark:"):
                return Rewrite(token=token[5:], selector=lambda s: f".dark {s}")
            return None

        resolver = Resolver(variants=[dark])
        result = resolver.resolve("dark:c:red")
        assert result.selector == r".dark .dark\:c\:red"
        assert resolver.resolve("c:red!").declaration == {"color": "var(--color-red!, red!)"}

    def test_properties_expose_config(self):
        theme = Theme(breakpoints={"sm": "1px"})
        resolver = Resolver(theme=theme)
        assert resolver.theme is theme
        assert len(resolver.variants) == 3
        assert resolver.rules[0].name == "height"


# ---------------------------------------------------------------------------
# Strict and batch resolution
# ---------------------------------------------------------------------------


class TestResolveOrRaise:
    def test_resolved(self):
        assert Resolver().resolve_or_raise("p:4").declaration == {"padding": "0.25rem"}

    def test_unresolved_raises(self):
        with pytest.raises(UnresolvedTokenError) as exc_info:
            Resolver().resolve_or_raise("nope")
        assert exc_info.value.token == "nope"
        assert "nope" in str(exc_info.value)


class TestResolveAll:
    def test_dedupes_and_skips_unresolved(self):
        results = Resolver().resolve_all(["p:4", "nope", "p:4", "m:8"])
        assert [r.token for r in results] == ["p:4", "m:8"]

    def test_empty(self):
        assert Resolver().resolve_all([]) == []


class TestLogging:
    def test_unresolved_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mingled"):
            resolve("nope")
        assert "unresolved" in caplog.text

    def test_match_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mingled"):
            resolve("h:full")
        assert "matched rule height" in caplog.text
