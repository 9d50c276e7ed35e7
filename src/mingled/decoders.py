"""Value decoders: pure string-to-value helpers shared by rule handlers.

Every decoder is total. Input it cannot interpret is passed through
unchanged rather than raising, so a malformed utility token degrades to an
odd-looking value instead of a failed build.
"""

from __future__ import annotations

import math
import re

__all__ = [
    "px_to_rem",
    "resolve_color",
    "expand_spacing",
    "font_weight",
    "flex_styles",
    "border_value",
    "side_length",
    "is_numeric",
    "format_number",
]

ROOT_FONT_SIZE = 16

_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_LEADING_INT_RE = re.compile(r"^\s*([+-]?)(\d+)", re.ASCII)
_DIGITS_RE = re.compile(r"^\d+$", re.ASCII)


# ---------------------------------------------------------------------------
# Keyword tables
# ---------------------------------------------------------------------------

FONT_WEIGHTS: dict[str, str] = {
    "thin": "100",
    "xlight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "xbold": "800",
    "black": "900",
}

JUSTIFY_OPTIONS: dict[str, str] = {
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
}

ALIGN_OPTIONS: dict[str, str] = {
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "stretch": "stretch",
    "baseline": "baseline",
}

SIDE_KEYWORDS: dict[str, str] = {
    "full": "100%",
    "screen": "100vh",
    "fit": "fit-content",
}


# ---------------------------------------------------------------------------
# Numbers and lengths
# ---------------------------------------------------------------------------


def is_numeric(value: str) -> bool:
    """Return True if *value* is a decimal number like ``8``, ``-4``, ``1.5`` or ``1e3``."""
    return bool(_NUMERIC_RE.match(value))


def format_number(number: float) -> str:
    """Format *number* without a trailing ``.0`` for integral values."""
    if number.is_integer():
        return str(int(number))
    return repr(number)


def px_to_rem(value: str) -> str:
    """Convert a pixel count to rem; non-numeric values pass through."""
    if not is_numeric(value):
        return value
    rem = float(value) / ROOT_FONT_SIZE
    if not math.isfinite(rem):
        return value
    return f"{format_number(rem)}rem"


def side_length(value: str) -> str:
    """Parse a width/height value: keyword shortcut, bare pixels, or verbatim."""
    if value in SIDE_KEYWORDS:
        return SIDE_KEYWORDS[value]
    if _DIGITS_RE.match(value):
        return f"{value}px"
    return value


def expand_spacing(value: str) -> str:
    """Expand ``8|0|4`` style shorthand into space-separated rem values.

    Empty segments become ``0``, so ``|8`` expands to ``0rem 0.5rem``.
    """
    parts = [part or "0" for part in value.split("|")]
    return " ".join(px_to_rem(part) for part in parts)


# ---------------------------------------------------------------------------
# Colors and borders
# ---------------------------------------------------------------------------


def _opacity_percentage(raw: str) -> str:
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return raw
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if sign == "-" and digits != "0":
        return f"-{digits}"
    return digits


def resolve_color(color: str) -> str:
    """Resolve a color token, honoring an optional ``/<opacity>`` suffix.

    Hex literals are emitted verbatim; names go through a ``--color-<name>``
    custom property that falls back to the name itself.
    """
    if "/" in color:
        base, opacity = color.split("/")[:2]
        percentage = _opacity_percentage(opacity)
        if base.startswith("#"):
            return f"color-mix(in srgb, {base} {percentage}%, transparent)"
        return (
            f"color-mix(in srgb, var(--color-{base}, {base}) {percentage}%, transparent)"
        )
    if color.startswith("#"):
        return color
    return f"var(--color-{color}, {color})"


def border_value(value: str) -> str:
    """Compose a border shorthand from ``color|width|style``."""
    if value in ("0", "none"):
        return "none"
    parts = value.split("|")
    color = parts[0]
    width = parts[1] if len(parts) > 1 else "1"
    style = parts[2] if len(parts) > 2 else "solid"
    return f"{width}px {style} {resolve_color(color)}"


# ---------------------------------------------------------------------------
# Typography and flex
# ---------------------------------------------------------------------------


def font_weight(weight: str) -> str:
    return FONT_WEIGHTS.get(weight, weight)


def flex_styles(value: str | None, kind: str | None) -> dict[str, str]:
    """Build flex container styles.

    *kind* is ``"col"`` (column direction), ``"inline"`` (inline-flex) or
    None.  *value* is either ``justify|align`` keywords or numeric
    ``grow|shrink|basis`` parts, which produce only the ``flex`` shorthand.
    """
    styles = {
        "display": "inline-flex" if kind == "inline" else "flex",
        "flex-direction": "column" if kind == "col" else "row",
    }
    if not value:
        return styles

    parts = value.split("|")
    if all(is_numeric(part) for part in parts):
        return {"flex": " ".join(parts)}

    justify = parts[0]
    align = parts[1] if len(parts) > 1 else None

    if justify in JUSTIFY_OPTIONS:
        styles["justify-content"] = JUSTIFY_OPTIONS[justify]
    if align is not None and align in ALIGN_OPTIONS:
        styles["align-items"] = ALIGN_OPTIONS[align]

    if justify == "center" and align is None:
        styles["align-items"] = "center"
    return styles
