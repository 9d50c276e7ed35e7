"""CSS text rendering for resolutions.

The core resolver only produces structured results; these helpers turn them
into stylesheet text for the CLI and for hosts that want a simple emitter.
"""

from __future__ import annotations

from collections.abc import Iterable

from mingled.model.declaration import Declaration
from mingled.model.rewrite import Resolution
from mingled.variants import PARENT_SEPARATOR

__all__ = ["escape_selector", "render_declaration", "render_resolution", "render_stylesheet"]

INDENT = "  "


def escape_selector(token: str) -> str:
    """Return a class selector for *token*, escaping CSS-significant characters."""
    escaped: list[str] = []
    for index, char in enumerate(token):
        if (char.isascii() and char.isalnum()) or char in "-_" or ord(char) >= 0x80:
            if char.isdigit() and (index == 0 or (index == 1 and token[0] == "-")):
                escaped.append(f"\\{ord(char):x} ")
            else:
                escaped.append(char)
        else:
            escaped.append(f"\\{char}")
    return "." + "".join(escaped)


def render_declaration(declaration: Declaration, depth: int = 1) -> list[str]:
    """Render the flat entries of *declaration* as ``prop: value;`` lines.

    Unset (None) values are omitted.
    """
    pad = INDENT * depth
    return [f"{pad}{prop}: {value};" for prop, value in declaration.properties().items()]


def _render_block(selector: str, declaration: Declaration, depth: int) -> list[str]:
    lines: list[str] = []
    body = render_declaration(declaration, depth + 1)
    if body:
        lines.append(f"{INDENT * depth}{selector} {{")
        lines.extend(body)
        lines.append(f"{INDENT * depth}}}")
    for fragment, nested in declaration.nested().items():
        nested_selector = (
            fragment.replace("&", selector) if "&" in fragment else f"{selector} {fragment}"
        )
        lines.extend(_render_block(nested_selector, nested, depth))
    return lines


def render_resolution(resolution: Resolution) -> str:
    """Render one resolution, wrapping it in its parent contexts outermost-first."""
    parents = resolution.parent.split(PARENT_SEPARATOR) if resolution.parent else []
    lines: list[str] = []
    for depth, parent in enumerate(parents):
        lines.append(f"{INDENT * depth}{parent} {{")
    lines.extend(_render_block(resolution.selector, resolution.declaration, len(parents)))
    for depth in reversed(range(len(parents))):
        lines.append(f"{INDENT * depth}}}")
    return "\n".join(lines)


def render_stylesheet(resolutions: Iterable[Resolution]) -> str:
    """Render *resolutions* in the order given, one blank line between rules."""
    text = "\n\n".join(filter(None, (render_resolution(r) for r in resolutions)))
    return f"{text}\n" if text else ""
