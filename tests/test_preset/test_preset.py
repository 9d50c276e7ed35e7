"""Tests for the theme and the host-facing preset."""

import pytest

from mingled import DEFAULT_THEME, Preset, Theme, mingled
from mingled.rules import RULES
from mingled.transforms import VariantGroupTransform
from mingled.variants import VARIANTS


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------


class TestTheme:
    def test_default_breakpoints(self):
        assert dict(DEFAULT_THEME.breakpoints) == {
            "sm": "640px",
            "md": "768px",
            "lg": "1024px",
            "xl": "1280px",
        }

    def test_breakpoint_lookup(self):
        assert DEFAULT_THEME.breakpoint("lg") == "1024px"
        assert DEFAULT_THEME.breakpoint("2xl") is None

    def test_breakpoints_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_THEME.breakpoints["md"] = "1px"  # type: ignore[index]

    def test_input_mapping_copied(self):
        source = {"md": "800px"}
        theme = Theme(breakpoints=source)
        source["md"] = "1px"
        assert theme.breakpoint("md") == "800px"

    def test_with_breakpoints_returns_new_theme(self):
        theme = DEFAULT_THEME.with_breakpoints(md="900px")
        assert theme.breakpoint("md") == "900px"
        assert theme.breakpoint("sm") == "640px"
        assert DEFAULT_THEME.breakpoint("md") == "768px"

    def test_hashable_and_consistent_with_equality(self):
        theme = Theme(breakpoints={"md": "768px", "sm": "640px", "lg": "1024px", "xl": "1280px"})
        assert theme == DEFAULT_THEME
        assert hash(theme) == hash(DEFAULT_THEME)
        assert len({DEFAULT_THEME, theme, DEFAULT_THEME.with_breakpoints(md="900px")}) == 2


# ---------------------------------------------------------------------------
# Preset
# ---------------------------------------------------------------------------


class TestPreset:
    def test_defaults(self):
        preset = mingled()
        assert isinstance(preset, Preset)
        assert preset.name == "mingled"
        assert preset.theme is DEFAULT_THEME
        assert preset.rules == RULES
        assert preset.variants == VARIANTS

    def test_transformers(self):
        preset = mingled()
        assert len(preset.transformers) == 1
        assert isinstance(preset.transformers[0], VariantGroupTransform)

    def test_custom_theme_flows_to_resolver(self):
        preset = mingled(Theme(breakpoints={"md": "700px"}))
        result = preset.resolver().resolve("p:4@md")
        assert result.parent == "@media (min-width: 700px)"

    def test_hashable(self):
        assert hash(mingled()) == hash(mingled())
        assert mingled() in {mingled()}

    def test_autocomplete(self):
        assert mingled().autocomplete() == [
            "m:(0|4|8|12|16|20|24|28|32|36|40|44|48)",
            "p:(0|4|8|12|16|20|24|28|32|36|40|44|48)",
        ]
