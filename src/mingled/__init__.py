"""Mingled - a utility-class resolver: short tokens in, CSS declarations out."""

from mingled.model import Declaration, Resolution, Rewrite
from mingled.preset import Preset, mingled
from mingled.resolver import Resolver, resolve
from mingled.theme import DEFAULT_THEME, Theme

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Declaration",
    "Resolution",
    "Rewrite",
    "Theme",
    "DEFAULT_THEME",
    "Resolver",
    "resolve",
    "Preset",
    "mingled",
]
