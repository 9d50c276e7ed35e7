"""Variant group expansion: ``hover:(c:red bg:blue)`` -> ``hover:c:red hover:bg:blue``.

Hosts run this over class attribute text before splitting it into tokens,
so the resolver itself only ever sees plain tokens.
"""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from mingled.errors import GroupSyntaxError

__all__ = ["VariantGroupTransform", "expand_variant_groups"]

GRAMMAR_PATH = Path(__file__).parent / "variant_group.lark"

_parser = Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


class _GroupTransformer(Transformer):  # type: ignore[type-arg]
    """Flatten a parse tree into a list of plain tokens."""

    def WORD(self, token: Token) -> list[str]:
        return [str(token)]

    def PREFIX(self, token: Token) -> str:
        # Drop the opening parenthesis, keep the separator.
        return str(token)[:-1]

    def group(self, children: list[object]) -> list[str]:
        prefix = children[0]
        return [f"{prefix}{token}" for item in children[1:] for token in item]  # type: ignore[union-attr]

    def start(self, children: list[list[str]]) -> list[str]:
        return [token for item in children for token in item]


def expand_variant_groups(text: str) -> list[str]:
    """Split class text into tokens, expanding any variant groups.

    Groups may nest: ``md:(hover:(c:red) p:4)`` gives
    ``["md:hover:c:red", "md:p:4"]``.
    """
    try:
        tree = _parser.parse(text)
    except UnexpectedInput as e:
        raise GroupSyntaxError(
            f"Unbalanced variant group in {text!r}", column=getattr(e, "column", None)
        ) from e
    return _GroupTransformer().transform(tree)


class VariantGroupTransform:
    """Rewrite class text so every grouped token is written out in full."""

    name = "variant-group"

    def apply(self, text: str) -> str:
        return " ".join(expand_variant_groups(text))
