"""Theme: the read-only static configuration shared by handlers and variants."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

DEFAULT_BREAKPOINTS: Mapping[str, str] = MappingProxyType({
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
})


@dataclass(frozen=True)
class Theme:
    """Named breakpoint lengths used by the responsive variant."""

    breakpoints: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))

    def __post_init__(self) -> None:
        # Copy into a read-only view.
        object.__setattr__(self, "breakpoints", MappingProxyType(dict(self.breakpoints)))

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.breakpoints.items())))

    def breakpoint(self, name: str) -> str | None:
        """Return the min-width length for *name*, or None if undefined."""
        return self.breakpoints.get(name)

    def with_breakpoints(self, **breakpoints: str) -> Theme:
        """Return a new Theme with *breakpoints* merged over the current ones."""
        return replace(self, breakpoints={**self.breakpoints, **breakpoints})


DEFAULT_THEME = Theme()
