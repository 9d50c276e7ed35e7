"""Mingled model layer -- public type re-exports."""

from mingled.model.declaration import Declaration, Value
from mingled.model.rewrite import (
    BodyHook,
    NestingHook,
    Resolution,
    Rewrite,
    SelectorHook,
)

__all__ = [
    # declaration
    "Value",
    "Declaration",
    # rewrite
    "SelectorHook",
    "BodyHook",
    "NestingHook",
    "Rewrite",
    "Resolution",
]
