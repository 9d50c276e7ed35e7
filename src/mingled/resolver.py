"""Resolver: the single "token -> declaration" entry point.

    token -> variant stages -> reduced token + rewrites
          -> matcher -> raw declaration
          -> body / selector / nesting hooks (in strip order) -> Resolution
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mingled.errors import UnresolvedTokenError
from mingled.matcher import match
from mingled.model.rewrite import Resolution
from mingled.render import escape_selector
from mingled.rules import RULES, Rule
from mingled.theme import DEFAULT_THEME, Theme
from mingled.variants import VARIANTS, VariantStage, apply_variants

__all__ = ["Resolver", "resolve"]

logger = logging.getLogger(__name__)


class Resolver:
    """Resolve utility tokens against a rule table and variant pipeline.

    All inputs are immutable, so one instance can be shared freely and
    resolving the same token twice always yields equal results.
    """

    def __init__(
        self,
        theme: Theme = DEFAULT_THEME,
        rules: Iterable[Rule] = RULES,
        variants: Iterable[VariantStage] = VARIANTS,
    ) -> None:
        self._theme = theme
        self._rules = tuple(rules)
        self._variants = tuple(variants)

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def variants(self) -> tuple[VariantStage, ...]:
        return self._variants

    def resolve(self, token: str) -> Resolution | None:
        """Resolve *token*, or return None if it is not a utility."""
        reduced = apply_variants(token, self._theme, self._variants)
        found = match(reduced.token, self._rules)
        if found is None:
            logger.debug("token %r is unresolved", token)
            return None

        declaration = found.declaration
        selector = escape_selector(token)
        parent: str | None = None
        for rewrite in reduced.rewrites:
            if rewrite.body is not None:
                declaration = rewrite.body(declaration)
            if rewrite.selector is not None:
                selector = rewrite.selector(selector)
            if rewrite.nesting is not None:
                parent = rewrite.nesting(parent)

        return Resolution(
            token=token,
            declaration=declaration,
            selector=selector,
            parent=parent,
            rule=found.rule.name,
        )

    def resolve_or_raise(self, token: str) -> Resolution:
        """Resolve *token*; raises :class:`UnresolvedTokenError` if nothing matches."""
        resolution = self.resolve(token)
        if resolution is None:
            raise UnresolvedTokenError(token)
        return resolution

    def resolve_all(self, tokens: Iterable[str]) -> list[Resolution]:
        """Resolve each unique token in first-seen order, skipping unresolved ones."""
        seen: set[str] = set()
        resolutions: list[Resolution] = []
        for token in tokens:
            if token in seen:
                continue
            seen.add(token)
            resolution = self.resolve(token)
            if resolution is not None:
                resolutions.append(resolution)
        return resolutions


_default = Resolver()


def resolve(token: str) -> Resolution | None:
    """Resolve *token* with the default theme, rules and variants."""
    return _default.resolve(token)
