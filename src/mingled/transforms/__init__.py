from mingled.transforms.base import Transform
from mingled.transforms.variant_group import VariantGroupTransform, expand_variant_groups

BUILTIN_TRANSFORMS: tuple[Transform, ...] = (VariantGroupTransform(),)


def apply_transforms(text, transforms=BUILTIN_TRANSFORMS):
    """Apply *transforms* (the built-in ones by default) to class *text* in order."""
    for t in transforms:
        text = t.apply(text)
    return text


__all__ = [
    "Transform",
    "VariantGroupTransform",
    "expand_variant_groups",
    "BUILTIN_TRANSFORMS",
    "apply_transforms",
]
