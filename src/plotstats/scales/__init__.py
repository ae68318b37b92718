"""Color scales and the scale ``apply`` contract used by statistics."""

from .base import (
    MISSING,
    DerivedData,
    ScaleElement,
    apply_scale,
    is_missing,
)
from .color import (
    ContinuousColorScale,
    DiscreteColorScale,
    color_gradient,
    color_hue,
)

__all__ = [
    "MISSING",
    "DerivedData",
    "ScaleElement",
    "apply_scale",
    "is_missing",
    "ContinuousColorScale",
    "DiscreteColorScale",
    "color_gradient",
    "color_hue",
]
