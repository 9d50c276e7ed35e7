"""Candidate token extraction from markup source."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from mingled.errors import GroupSyntaxError
from mingled.transforms import BUILTIN_TRANSFORMS, Transform, apply_transforms

__all__ = ["extract_tokens"]

logger = logging.getLogger(__name__)

_CLASS_ATTR_RE = re.compile(
    r"""\bclass(?:Name)?\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')""",
)


def _class_values(text: str) -> Iterable[str]:
    for found in _CLASS_ATTR_RE.finditer(text):
        yield found.group("dq") if found.group("dq") is not None else found.group("sq")


def extract_tokens(
    text: str, transforms: Iterable[Transform] = BUILTIN_TRANSFORMS
) -> list[str]:
    """Return the unique class tokens in *text*, in first-seen order.

    Class attribute values are run through *transforms* first.  A value whose
    variant groups don't parse is split on whitespace as-is.
    """
    transforms = tuple(transforms)
    seen: dict[str, None] = {}
    for value in _class_values(text):
        try:
            value = apply_transforms(value, transforms)
        except GroupSyntaxError as exc:
            logger.warning("skipping group expansion: %s", exc)
        for token in value.split():
            seen.setdefault(token, None)
    return list(seen)
