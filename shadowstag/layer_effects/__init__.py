"""
ShadowStag layer effects

Parameter model and geometry for drop shadows.

Example:
    >>> from shadowstag.layer_effects import ShadowParameters, SpreadCalculator
    >>> params = ShadowParameters(radius=5, offset_x=10, offset_y=10, spread=2)
    >>> result = SpreadCalculator.compute(params)
    >>> result.padding.left, result.spread_extents
    (19, (4, 4))
"""

from .base import PixelFormat, Expansion, EffectResult
from .shadow_parameters import (
    ShadowParameters,
    MIN_RADIUS,
    MAX_EXTENT,
    DEFAULT_SHADOW_RADIUS,
    DEFAULT_SHADOW_DX,
    DEFAULT_SHADOW_DY,
    DEFAULT_SHADOW_SPREAD,
    DEFAULT_SHADOW_COLOR,
)
from .spread import SpreadCalculator, SpreadResult

__all__ = [
    # Base types
    "PixelFormat",
    "Expansion",
    "EffectResult",
    # Parameters
    "ShadowParameters",
    "MIN_RADIUS",
    "MAX_EXTENT",
    "DEFAULT_SHADOW_RADIUS",
    "DEFAULT_SHADOW_DX",
    "DEFAULT_SHADOW_DY",
    "DEFAULT_SHADOW_SPREAD",
    "DEFAULT_SHADOW_COLOR",
    # Geometry
    "SpreadCalculator",
    "SpreadResult",
]
