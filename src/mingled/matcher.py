"""Matcher: first-match-wins lookup of a token in the rule table."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from mingled.model.declaration import Declaration
from mingled.rules import RULES, Rule

__all__ = ["Match", "match"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    """The rule that fired for a token and the declaration it produced."""

    rule: Rule
    declaration: Declaration


def match(token: str, rules: Iterable[Rule] = RULES) -> Match | None:
    """Walk *rules* in order and return the first match for *token*.

    Returns None when no pattern matches; the token is then not a utility.
    """
    for candidate in rules:
        found = candidate.match(token)
        if found is None:
            continue
        declaration = Declaration(candidate.handler(*found.groups()))
        logger.debug("token %r matched rule %s", token, candidate.name)
        return Match(rule=candidate, declaration=declaration)
    return None
