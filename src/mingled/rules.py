"""The utility rule table.

Each rule pairs a full-token pattern with a handler.  The handler receives the
pattern's positional capture groups (``None`` for optional groups that did
not participate) and returns a mapping of CSS properties.

Order is part of the contract: the matcher stops at the first pattern that
matches, so keyword rules that share a prefix with a parameterized rule must
stay where they are relative to it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping

from mingled.decoders import (
    border_value,
    expand_spacing,
    flex_styles,
    font_weight,
    px_to_rem,
    resolve_color,
    side_length,
)

Handler = Callable[..., Mapping[str, object]]


@dataclass(frozen=True)
class Rule:
    """A single entry of the rule table.

    Attributes:
        name: Short identifier shown by ``mingled rules`` and in debug logs.
        pattern: Compiled pattern; must match the whole token.
        handler: Builds the declaration from the pattern's capture groups.
        autocomplete: Optional completion hint for editor integrations.
    """

    name: str
    pattern: re.Pattern[str]
    handler: Handler
    autocomplete: str | None = None

    def match(self, token: str) -> re.Match[str] | None:
        return self.pattern.fullmatch(token)


def rule(
    name: str, pattern: str, handler: Handler, autocomplete: str | None = None
) -> Rule:
    """Compile *pattern* (ASCII semantics for ``\\w``/``\\d``) into a Rule."""
    return Rule(
        name=name,
        pattern=re.compile(pattern, re.ASCII),
        handler=handler,
        autocomplete=autocomplete,
    )


def _static(**declaration: str) -> Handler:
    """Handler for keyword rules whose declaration never varies."""
    frozen = dict(declaration)
    return lambda: dict(frozen)


def _px(value: str | None) -> str | None:
    return f"{value}px" if value else None


def _px_or_percent(value: str | None, default: str | None = None) -> str | None:
    if not value:
        return default
    return value if "%" in value else f"{value}px"


# ---------------------------------------------------------------------------
# Handlers with more than a line of logic
# ---------------------------------------------------------------------------


def _line_height(value: str) -> dict[str, str]:
    if float(value).is_integer():
        return {"line-height": f"{value}px"}
    return {"line-height": value}


def _font_family(value: str) -> dict[str, str]:
    if value == "inherit":
        return {"font-family": "inherit"}
    return {"font-family": f"var(--font-{value}, {value})"}


def _radius(
    tl: str, tr: str | None, br: str | None, bl: str | None
) -> dict[str, str]:
    # Trailing corners default the way 1-4 value CSS shorthand does.
    top_left = f"{tl}px"
    top_right = f"{tr}px" if tr else top_left
    bottom_right = f"{br}px" if br else top_left
    bottom_left = f"{bl}px" if bl else top_right
    return {"border-radius": f"{top_left} {top_right} {bottom_right} {bottom_left}"}


def _absolute(
    top: str | None, right: str | None, bottom: str | None, left: str | None
) -> dict[str, str | None]:
    return {
        "position": "absolute",
        "top": _px_or_percent(top),
        "right": _px_or_percent(right),
        "bottom": _px_or_percent(bottom),
        "left": _px_or_percent(left),
    }


def _fixed(
    top: str | None, right: str | None, bottom: str | None, left: str | None
) -> dict[str, str | None]:
    return {
        "position": "fixed",
        "top": _px(top),
        "right": _px(right),
        "bottom": _px(bottom),
        "left": _px(left),
    }


def _translate(x: str | None, _separator: str | None, y: str | None) -> dict[str, str]:
    return {
        "transform": f"translate({_px_or_percent(x, '0')}, {_px_or_percent(y, '0')})"
    }


def _shadow(x: str, y: str, blur: str, spread: str, color: str) -> dict[str, str]:
    return {"box-shadow": f"{x}px {y}px {blur}px {spread}px rgba({color})"}


def _stroke(color: str, width: str | None) -> dict[str, str | None]:
    return {"stroke": color, "stroke-width": _px(width)}


_SPACING_HINT = "(0|4|8|12|16|20|24|28|32|36|40|44|48)"


# ---------------------------------------------------------------------------
# The table
# ---------------------------------------------------------------------------

RULES: tuple[Rule, ...] = (
    # Height
    rule("height", r"^h:(.+)$", lambda s: {"height": side_length(s)}),
    rule("min-height", r"^min-h:(.+)$", lambda s: {"min-height": side_length(s)}),
    rule("max-height", r"^max-h:(.+)$", lambda s: {"max-height": side_length(s)}),
    # Width
    rule("width", r"^w:(.+)$", lambda s: {"width": side_length(s)}),
    rule("min-width", r"^min-w:(.+)$", lambda s: {"min-width": side_length(s)}),
    rule("max-width", r"^max-w:(.+)$", lambda s: {"max-width": side_length(s)}),
    # Size
    rule(
        "size",
        r"^size:(.+)$",
        lambda s: {"width": side_length(s), "height": side_length(s)},
    ),
    # Colors
    rule("color", r"^c:(.+)$", lambda v: {"color": resolve_color(v)}),
    rule("background", r"^bg:(.+)$", lambda v: {"background-color": resolve_color(v)}),
    # Margin
    rule(
        "margin",
        r"^m:(.+)$",
        lambda s: {"margin": expand_spacing(s)},
        autocomplete=f"m:{_SPACING_HINT}",
    ),
    rule(
        "margin-x",
        r"^mx:(.+)$",
        lambda s: {"margin-left": px_to_rem(s), "margin-right": px_to_rem(s)},
    ),
    rule(
        "margin-y",
        r"^my:(.+)$",
        lambda s: {"margin-top": px_to_rem(s), "margin-bottom": px_to_rem(s)},
    ),
    rule("margin-top", r"^mt:(.+)$", lambda s: {"margin-top": px_to_rem(s)}),
    rule("margin-right", r"^mr:(.+)$", lambda s: {"margin-right": px_to_rem(s)}),
    rule("margin-bottom", r"^mb:(.+)$", lambda s: {"margin-bottom": px_to_rem(s)}),
    rule("margin-left", r"^ml:(.+)$", lambda s: {"margin-left": px_to_rem(s)}),
    # Padding
    rule(
        "padding",
        r"^p:(.+)$",
        lambda s: {"padding": expand_spacing(s)},
        autocomplete=f"p:{_SPACING_HINT}",
    ),
    rule(
        "padding-x",
        r"^px:(.+)$",
        lambda s: {"padding-left": px_to_rem(s), "padding-right": px_to_rem(s)},
    ),
    rule(
        "padding-y",
        r"^py:(.+)$",
        lambda s: {"padding-top": px_to_rem(s), "padding-bottom": px_to_rem(s)},
    ),
    rule("padding-top", r"^pt:(.+)$", lambda s: {"padding-top": px_to_rem(s)}),
    rule("padding-right", r"^pr:(.+)$", lambda s: {"padding-right": px_to_rem(s)}),
    rule("padding-bottom", r"^pb:(.+)$", lambda s: {"padding-bottom": px_to_rem(s)}),
    rule("padding-left", r"^pl:(.+)$", lambda s: {"padding-left": px_to_rem(s)}),
    # Typography
    rule("font-size", r"^f:(\d+)$", lambda s: {"font-size": px_to_rem(s)}),
    rule("line-height", r"^lh:(\d+(?:\.\d+)?)$", _line_height),
    rule("font-weight", r"^fw:(\w+|\d+)$", lambda w: {"font-weight": font_weight(w)}),
    rule("bold", r"^bold$", _static(**{"font-weight": "bold"})),
    rule("semi", r"^semi$", _static(**{"font-weight": "600"})),
    rule("regular", r"^regular$", _static(**{"font-weight": "400"})),
    rule("medium", r"^medium$", _static(**{"font-weight": "500"})),
    rule("font-family", r"^ff:(\w+)$", _font_family),
    rule("pre-wrap", r"^pre-wrap$", _static(**{"white-space": "pre-wrap"})),
    # Flex
    rule(
        "flex",
        r"^flex(?:-?(col|inline))?(?::(.+))?$",
        lambda kind, value: flex_styles(value, kind),
    ),
    rule("flex-wrap", r"^flex-wrap$", _static(**{"flex-wrap": "wrap"})),
    rule("gap", r"^gap:(\d+)$", lambda s: {"gap": f"{s}px"}),
    # Display
    rule("block", r"^block$", _static(display="block")),
    rule("inline", r"^inline$", _static(display="inline")),
    rule("inline-block", r"^inline-block$", _static(display="inline-block")),
    # Text transform
    rule("text-transform", r"^tt:(\w+)$", lambda t: {"text-transform": t}),
    rule("upper", r"^upper$", _static(**{"text-transform": "uppercase"})),
    rule("lower", r"^lower$", _static(**{"text-transform": "lowercase"})),
    rule("capitalize", r"^capitalize$", _static(**{"text-transform": "capitalize"})),
    # Text decoration
    rule("text-decoration", r"^td:(\w+)$", lambda t: {"text-decoration": t}),
    rule("underline", r"^underline$", _static(**{"text-decoration": "underline"})),
    rule(
        "line-through", r"^line-through$", _static(**{"text-decoration": "line-through"})
    ),
    rule("no-underline", r"^no-underline$", _static(**{"text-decoration": "none"})),
    # Cursor
    rule("cursor", r"^cursor:(\w+)$", lambda c: {"cursor": c}),
    rule("pointer", r"^pointer$", _static(cursor="pointer")),
    # Text align and wrapping
    rule(
        "text-align",
        r"^ta:(left|right|center|justify)$",
        lambda t: {"text-align": t},
    ),
    rule("nowrap", r"^nowrap$", _static(**{"white-space": "nowrap"})),
    rule(
        "ellipsis",
        r"^ellipsis$",
        _static(**{
            "overflow": "hidden",
            "text-overflow": "ellipsis",
            "white-space": "nowrap",
        }),
    ),
    # Borders
    rule("border", r"^b:(.+)$", lambda v: {"border": border_value(v)}),
    rule("border-bottom", r"^bb:(.+)$", lambda v: {"border-bottom": border_value(v)}),
    rule("border-top", r"^bt:(.+)$", lambda v: {"border-top": border_value(v)}),
    rule("border-right", r"^br:(.+)$", lambda v: {"border-right": border_value(v)}),
    rule("border-left", r"^bl:(.+)$", lambda v: {"border-left": border_value(v)}),
    # Border radius, clockwise from top-left
    rule("radius", r"^r:(\d+)(?:\|(\d+))?(?:\|(\d+))?(?:\|(\d+))?$", _radius),
    # Outline, opacity, overflow
    rule("outline", r"^outline:(.+)$", lambda v: {"outline": v}),
    rule("opacity", r"^o:(\d+(?:\.\d+)?)$", lambda s: {"opacity": s}),
    rule("overflow", r"^of:(\w+)$", lambda v: {"overflow": v}),
    rule("overflow-x", r"^ofx:(\w+)$", lambda v: {"overflow-x": v}),
    rule("overflow-y", r"^ofy:(\w+)$", lambda v: {"overflow-y": v}),
    rule("overflow-hidden", r"^ofh$", _static(overflow="hidden")),
    # Shadow
    rule(
        "shadow",
        r"^shadow:(-?\d+)\|(-?\d+)\|(-?\d+)\|(-?\d+)\|\(([^)]+)\)$",
        _shadow,
    ),
    # Stacking and appearance
    rule("z-index", r"^z:(\d+)$", lambda s: {"z-index": s}),
    rule("appearance", r"^appearance:(\w+)$", lambda v: {"appearance": v}),
    rule("none", r"^none$", _static(appearance="none")),
    rule("hide", r"^hide$", _static(display="none")),
    # Position
    rule("relative", r"^rel$", _static(position="relative")),
    rule(
        "absolute",
        r"^abs:([^|]*)?(?:\|([^|]*)?(?:\|([^|]*)?(?:\|([^|]*))?)?)?$",
        _absolute,
    ),
    rule("fixed", r"^fixed:(\d+)?(?:\|(\d+))?(?:\|(\d+))?(?:\|(\d+))?$", _fixed),
    rule("bottom", r"^bottom:(\d+)$", lambda s: {"bottom": f"{s}px"}),
    rule("top", r"^top:(\d+)$", lambda s: {"top": f"{s}px"}),
    rule("left", r"^left:(\d+)$", lambda s: {"left": f"{s}px"}),
    rule("right", r"^right:(\d+)$", lambda s: {"right": f"{s}px"}),
    # Translate
    rule(
        "translate",
        r"^translate:(-?\d+(?:\.\d+)?%?)?(\|(-?\d+(?:\.\d+)?%?))?$",
        _translate,
    ),
    # SVG
    rule("stroke", r"^stroke:(\w+)(?:\|(\d+))?$", _stroke),
    # Hidden scrollbar
    rule(
        "scroll-hide",
        r"^scroll:hide$",
        lambda: {
            "&::-webkit-scrollbar": {"display": "none"},
            "-ms-overflow-style": "none",
            "scrollbar-width": "none",
        },
    ),
)


def autocomplete_hints(rules: tuple[Rule, ...] = RULES) -> list[str]:
    """Return the autocomplete hints declared by *rules*, in table order."""
    return [r.autocomplete for r in rules if r.autocomplete]
