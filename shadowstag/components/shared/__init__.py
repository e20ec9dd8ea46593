"""Framework-independent shadow compositing."""

from .host import Bounds, Surface, RenderContentInto, RequestRelayout
from .dirty_tracker import (
    DirtyTracker,
    DirtyTrigger,
    ShadowState,
    TRANSITIONS,
    PARAMETER_TRIGGERS,
)
from .capture import OffscreenCapture
from .compositor import ShadowCompositor, CachedShadowRaster, blend_over, tint_mask

__all__ = [
    # Host contract
    'Bounds',
    'Surface',
    'RenderContentInto',
    'RequestRelayout',
    # State
    'DirtyTracker',
    'DirtyTrigger',
    'ShadowState',
    'TRANSITIONS',
    'PARAMETER_TRIGGERS',
    # Pipeline
    'OffscreenCapture',
    'ShadowCompositor',
    'CachedShadowRaster',
    'blend_over',
    'tint_mask',
]
