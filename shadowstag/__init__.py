"""
ShadowStag - Soft drop shadows for rectangular content, rendered off-screen
"""

from .config import ShadowSettings, settings
from .color import RGBA8, DKGRAY, parse_color, color_alpha, color_to_hex
from .exceptions import ShadowError, ShadowAllocationError
from .layer_effects import (
    ShadowParameters,
    SpreadCalculator,
    SpreadResult,
    Expansion,
    MIN_RADIUS,
)
from .filters import ExtractAlpha, GaussianBlur
from .components.shared import (
    Bounds,
    Surface,
    DirtyTracker,
    DirtyTrigger,
    ShadowState,
    OffscreenCapture,
    ShadowCompositor,
    CachedShadowRaster,
)
from .components.pil import ShadowViewPil

__all__ = [
    # Configuration
    "ShadowSettings",
    "settings",
    # Colors
    "RGBA8",
    "DKGRAY",
    "parse_color",
    "color_alpha",
    "color_to_hex",
    # Errors
    "ShadowError",
    "ShadowAllocationError",
    # Parameters and geometry
    "ShadowParameters",
    "SpreadCalculator",
    "SpreadResult",
    "Expansion",
    "MIN_RADIUS",
    # Pipeline stages
    "ExtractAlpha",
    "GaussianBlur",
    "OffscreenCapture",
    # Compositing
    "Bounds",
    "Surface",
    "DirtyTracker",
    "DirtyTrigger",
    "ShadowState",
    "ShadowCompositor",
    "CachedShadowRaster",
    # Hosts
    "ShadowViewPil",
]

__version__ = "0.1.0"
