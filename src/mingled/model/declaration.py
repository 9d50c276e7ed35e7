"""Declaration model: the immutable style mapping produced by a rule handler."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Callable, Union

# A property value is a CSS string, None ("omit this property"), or a nested
# Declaration keyed by a selector fragment such as "&::-webkit-scrollbar".
Value = Union[str, None, "Declaration"]


class Declaration(Mapping[str, Value]):
    """Read-only mapping of CSS property names to values.

    Two shapes share this type:
        - flat entries: ``{"height": "100%"}``
        - nested entries: ``{"&::-webkit-scrollbar": Declaration(...)}``

    Plain dicts passed in (at any depth) are converted to Declarations, and a
    Declaration compares equal to a dict with the same items.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, object] | None = None, **kwargs: object) -> None:
        merged: dict[str, object] = dict(items or {})
        merged.update(kwargs)
        self._items: dict[str, Value] = {
            key: _coerce(value) for key, value in merged.items()
        }

    def __getitem__(self, key: str) -> Value:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Declaration({self._items!r})"

    # --- views ----------------------------------------------------------------

    def properties(self) -> dict[str, str]:
        """Return the flat string-valued entries, skipping unset ones."""
        return {k: v for k, v in self._items.items() if isinstance(v, str)}

    def nested(self) -> dict[str, Declaration]:
        """Return the entries keyed by a nested selector fragment."""
        return {k: v for k, v in self._items.items() if isinstance(v, Declaration)}

    def to_dict(self) -> dict[str, object]:
        """Return a plain dict copy, nested Declarations included."""
        return {
            k: v.to_dict() if isinstance(v, Declaration) else v
            for k, v in self._items.items()
        }

    # --- transforms -----------------------------------------------------------

    def map_values(self, fn: Callable[[str | None], str | None]) -> Declaration:
        """Return a new Declaration with *fn* applied to every leaf value.

        Nested Declarations are walked recursively; *fn* never sees them.
        """
        return Declaration({
            k: v.map_values(fn) if isinstance(v, Declaration) else fn(v)
            for k, v in self._items.items()
        })


def _coerce(value: object) -> Value:
    if value is None or isinstance(value, (str, Declaration)):
        return value
    if isinstance(value, Mapping):
        return Declaration(value)
    return str(value)
