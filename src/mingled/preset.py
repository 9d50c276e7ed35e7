"""The preset: everything a host framework needs to register mingled."""

from __future__ import annotations

from dataclasses import dataclass

from mingled.resolver import Resolver
from mingled.rules import RULES, Rule, autocomplete_hints
from mingled.theme import DEFAULT_THEME, Theme
from mingled.transforms import BUILTIN_TRANSFORMS, Transform
from mingled.variants import VARIANTS, VariantStage

__all__ = ["Preset", "mingled"]

PRESET_NAME = "mingled"


@dataclass(frozen=True)
class Preset:
    """Host-facing configuration bundle.

    Attributes:
        name: Identifier the host registers the preset under.
        theme: Static theme data (breakpoints).
        rules: The ordered rule table.
        variants: The ordered variant pipeline.
        transformers: Class-text transforms the host runs before tokenizing.
    """

    name: str = PRESET_NAME
    theme: Theme = DEFAULT_THEME
    rules: tuple[Rule, ...] = RULES
    variants: tuple[VariantStage, ...] = VARIANTS
    transformers: tuple[Transform, ...] = BUILTIN_TRANSFORMS

    def resolver(self) -> Resolver:
        return Resolver(theme=self.theme, rules=self.rules, variants=self.variants)

    def autocomplete(self) -> list[str]:
        return autocomplete_hints(self.rules)


def mingled(theme: Theme | None = None) -> Preset:
    """Build the preset, optionally with an alternate *theme*."""
    return Preset(theme=theme or DEFAULT_THEME)
