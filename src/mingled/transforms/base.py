"""Base protocol for class-text transforms."""

from __future__ import annotations

from typing import Protocol


class Transform(Protocol):
    """A text-to-text rewrite applied to class attribute text before tokenizing."""

    name: str

    def apply(self, text: str) -> str: ...
