"""Shadow compositing components and hosts."""

from .shared import (
    Bounds,
    Surface,
    DirtyTracker,
    DirtyTrigger,
    ShadowState,
    OffscreenCapture,
    ShadowCompositor,
    CachedShadowRaster,
)
from .pil import ShadowViewPil

__all__ = [
    'Bounds',
    'Surface',
    'DirtyTracker',
    'DirtyTrigger',
    'ShadowState',
    'OffscreenCapture',
    'ShadowCompositor',
    'CachedShadowRaster',
    'ShadowViewPil',
]
