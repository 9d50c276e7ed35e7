"""Variant pipeline: suffix-stripping stages that register result hooks.

Stages, in order:
    1. pseudo_class -- ``c:red:hover`` adds ``:hover`` to the selector
    2. important    -- ``c:red!`` appends ``!important`` to every value
    3. responsive   -- ``c:red@md`` nests the rule under a min-width media query

A stage is ``(token, theme) -> Rewrite | None``.  ``apply_variants`` keeps
trying the stages until none of the unused ones applies, so suffixes can be
written in any order (``c:red:hover@md!`` and ``c:red@md:hover!`` both work).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable

from mingled.model.declaration import Declaration
from mingled.model.rewrite import Rewrite
from mingled.theme import Theme

__all__ = [
    "PSEUDO_CLASSES",
    "BREAKPOINTS",
    "PARENT_SEPARATOR",
    "VariantStage",
    "Variants",
    "pseudo_class",
    "important",
    "responsive",
    "VARIANTS",
    "apply_variants",
]

logger = logging.getLogger(__name__)

VariantStage = Callable[[str, Theme], Rewrite | None]

PSEUDO_CLASSES = ("hover", "focus", "active", "visited", "disabled", "focus-within")
BREAKPOINTS = ("sm", "md", "lg", "xl")

# Joins nested parent contexts, e.g. two media queries from composed variants.
PARENT_SEPARATOR = " $$ "

_RESPONSIVE_RE = re.compile(r"^(.+)@(" + "|".join(BREAKPOINTS) + r")$")


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def pseudo_class(token: str, theme: Theme) -> Rewrite | None:
    for pseudo in PSEUDO_CLASSES:
        suffix = f":{pseudo}"
        if token.endswith(suffix):
            return Rewrite(
                token=token[: -len(suffix)],
                selector=lambda selector, suffix=suffix: f"{selector}{suffix}",
            )
    return None


def _add_important(value: str | None) -> str | None:
    if isinstance(value, str):
        return f"{value} !important"
    return value


def _important_body(declaration: Declaration) -> Declaration:
    return declaration.map_values(_add_important)


def important(token: str, theme: Theme) -> Rewrite | None:
    if not token.endswith("!"):
        return None
    return Rewrite(token=token[:-1], body=_important_body)


def responsive(token: str, theme: Theme) -> Rewrite | None:
    found = _RESPONSIVE_RE.match(token)
    if found is None:
        return None
    base, name = found.groups()
    length = theme.breakpoint(name)
    if length is None:
        return None
    media = f"@media (min-width: {length})"

    def nest(parent: str | None) -> str:
        if parent:
            return f"{parent}{PARENT_SEPARATOR}{media}"
        return media

    return Rewrite(token=base, nesting=nest)


VARIANTS: tuple[VariantStage, ...] = (pseudo_class, important, responsive)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Variants:
    """A token reduced by the pipeline plus the rewrites, in strip order."""

    token: str
    rewrites: tuple[Rewrite, ...] = ()


def apply_variants(
    token: str, theme: Theme, stages: tuple[VariantStage, ...] = VARIANTS
) -> Variants:
    """Strip variant suffixes from *token*.

    Stages are tried in order; when one applies, the walk restarts from the
    first stage with the reduced token.  A stage applies at most once.
    """
    result = Variants(token=token)
    used: frozenset[int] = frozenset()
    while True:
        for index, stage in enumerate(stages):
            if index in used:
                continue
            rewrite = stage(result.token, theme)
            if rewrite is None:
                continue
            logger.debug(
                "variant %s reduced %r to %r",
                getattr(stage, "__name__", stage), result.token, rewrite.token,
            )
            result = Variants(token=rewrite.token, rewrites=result.rewrites + (rewrite,))
            used = used | {index}
            break
        else:
            return result
