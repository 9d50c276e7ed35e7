"""Rewrite and Resolution records passed between the variant pipeline and resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from mingled.model.declaration import Declaration

SelectorHook = Callable[[str], str]
BodyHook = Callable[[Declaration], Declaration]
NestingHook = Callable[[str | None], str]


@dataclass(frozen=True)
class Rewrite:
    """The outcome of a variant stage that applied to a token.

    Attributes:
        token: The token with the stage's suffix stripped.
        selector: Extends the eventual CSS selector, if set.
        body: Rewrites the eventual declaration, if set.
        nesting: Extends the parent context (e.g. a media query), if set.
    """

    token: str
    selector: SelectorHook | None = None
    body: BodyHook | None = None
    nesting: NestingHook | None = None


@dataclass(frozen=True)
class Resolution:
    """A resolved token: its final declaration plus where it should be emitted."""

    token: str
    declaration: Declaration
    selector: str
    parent: str | None = None
    rule: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "token": self.token,
            "selector": self.selector,
            "parent": self.parent,
            "rule": self.rule,
            "declaration": self.declaration.to_dict(),
        }
