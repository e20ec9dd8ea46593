"""Shadow compositor.

Paints a soft drop shadow beneath host-rendered content:

1. Capture the content off-screen into a bounds-sized buffer
2. Extract its alpha silhouette
3. Blur the silhouette with the shadow radius
4. Tint it with the shadow color at the color's opacity and cache it

The pipeline only runs while the :class:`DirtyTracker` reports ``DIRTY``.
Every draw then paints the cached shadow, grown by the spread extents and
displaced by the offset, followed by the live content at full opacity.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import numpy as np
from PIL import Image as PILImage

from shadowstag.color import RGBA8
from shadowstag.config import ShadowSettings
from shadowstag.exceptions import ShadowAllocationError
from shadowstag.filters import ExtractAlpha, GaussianBlur
from shadowstag.layer_effects import Expansion, ShadowParameters, SpreadCalculator, SpreadResult
from .capture import OffscreenCapture
from .dirty_tracker import DirtyTracker, DirtyTrigger
from .host import Bounds, RenderContentInto, RequestRelayout, Surface

logger = logging.getLogger(__name__)


def blend_over(canvas: np.ndarray, src: np.ndarray, x: int, y: int) -> None:
    """Composite ``src`` over ``canvas`` at (x, y), clipped to the canvas.

    Both arrays are straight-alpha RGBA8. Uses Porter-Duff source-over:
    ``a = sa + da * (1 - sa)`` and ``rgb = (s * sa + d * da * (1 - sa)) / a``.

    :param canvas: Destination (H, W, 4), modified in place
    :param src: Source (h, w, 4)
    :param x: Left edge of ``src`` in canvas coordinates
    :param y: Top edge of ``src`` in canvas coordinates
    """
    src_h, src_w = src.shape[:2]

    # Calculate blending region (clamp to canvas bounds)
    dst_x1 = max(0, x)
    dst_y1 = max(0, y)
    dst_x2 = min(canvas.shape[1], x + src_w)
    dst_y2 = min(canvas.shape[0], y + src_h)

    # Skip if no visible region
    if dst_x2 <= dst_x1 or dst_y2 <= dst_y1:
        return

    src_region = src[dst_y1 - y:dst_y2 - y, dst_x1 - x:dst_x2 - x]
    dst_region = canvas[dst_y1:dst_y2, dst_x1:dst_x2]

    src_alpha = src_region[:, :, 3:4].astype(np.float32) / 255.0
    dst_alpha = dst_region[:, :, 3:4].astype(np.float32) / 255.0
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)

    premultiplied = (
        src_region[:, :, :3].astype(np.float32) * src_alpha +
        dst_region[:, :, :3].astype(np.float32) * dst_alpha * (1.0 - src_alpha)
    )
    out_rgb = np.divide(
        premultiplied, out_alpha,
        out=np.zeros_like(premultiplied),
        where=out_alpha > 0,
    )

    dst_region[:, :, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    dst_region[:, :, 3] = np.clip(np.rint(out_alpha[:, :, 0] * 255.0), 0, 255).astype(np.uint8)


def tint_mask(mask: np.ndarray, color: RGBA8) -> np.ndarray:
    """Turn a coverage mask into an RGBA8 raster of ``color``.

    The output alpha is the coverage scaled by the color's alpha channel.
    """
    raster = np.empty((*mask.shape, 4), dtype=np.uint8)
    raster[:, :, 0] = color[0]
    raster[:, :, 1] = color[1]
    raster[:, :, 2] = color[2]
    raster[:, :, 3] = np.rint(mask.astype(np.float32) * (color[3] / 255.0)).astype(np.uint8)
    return raster


@dataclass
class CachedShadowRaster:
    """Blurred, tinted silhouette ready to paint.

    Attributes:
        image: RGBA8 shadow scaled to its destination rectangle
        x: Left edge relative to the content origin
        y: Top edge relative to the content origin
        bounds: Content bounds the raster was computed for
        params: Parameters the raster was computed for
    """
    image: np.ndarray
    x: int
    y: int
    bounds: Bounds
    params: ShadowParameters


class ShadowCompositor:
    """Orchestrates the shadow pipeline and paints each frame.

    Example:
        def render(buffer):
            buffer[10:90, 10:90] = (255, 255, 255, 255)

        compositor = ShadowCompositor(render, request_relayout=view.relayout)
        compositor.radius = 8
        compositor.on_bounds_changed(100, 100)

        surface = Surface.for_content(compositor.bounds, compositor.padding_request)
        compositor.draw(surface)

    :param render_content_into: Host capability rasterizing the content into
        an RGBA8 buffer of the current bounds
    :param request_relayout: Host capability called when the padding changes
    :param params: Initial parameters, defaults come from ``settings``
    :param settings: Configuration, the module default if None
    """

    def __init__(
        self,
        render_content_into: RenderContentInto,
        request_relayout: RequestRelayout | None = None,
        params: ShadowParameters | None = None,
        settings: ShadowSettings | None = None,
    ):
        if settings is None:
            from shadowstag.config import settings as default_settings
            settings = default_settings

        self._render_content_into = render_content_into
        self._request_relayout = request_relayout
        self._params = params if params is not None else ShadowParameters.from_settings(settings)
        self._max_pixels = settings.MAX_BUFFER_PIXELS

        self._tracker = DirtyTracker()
        self._capture = OffscreenCapture(max_pixels=self._max_pixels)
        self._extract = ExtractAlpha()
        self._blur = GaussianBlur(radius=self._params.radius)
        self._bounds = Bounds()
        self._cache: CachedShadowRaster | None = None
        self._frame_buffer: np.ndarray | None = None
        self._spread: SpreadResult = SpreadCalculator.compute(self._params)
        self.pipeline_runs = 0

    # =========================================================================
    # Parameters
    # =========================================================================

    @property
    def params(self) -> ShadowParameters:
        return self._params

    @property
    def enabled(self) -> bool:
        return self._params.enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.update(enabled=value)

    @property
    def radius(self) -> float:
        return self._params.radius

    @radius.setter
    def radius(self, value: float) -> None:
        self.update(radius=value)

    @property
    def offset_x(self) -> float:
        return self._params.offset_x

    @offset_x.setter
    def offset_x(self, value: float) -> None:
        self.update(offset_x=value)

    @property
    def offset_y(self) -> float:
        return self._params.offset_y

    @offset_y.setter
    def offset_y(self, value: float) -> None:
        self.update(offset_y=value)

    @property
    def spread(self) -> float:
        return self._params.spread

    @spread.setter
    def spread(self, value: float) -> None:
        self.update(spread=value)

    @property
    def color(self) -> RGBA8:
        return self._params.color

    @color.setter
    def color(self, value: Any) -> None:
        self.update(color=value)

    def update(self, **changes: Any) -> None:
        """Change one or more parameters.

        Fields whose value actually changes mark the shadow dirty. The
        padding is recomputed either way and the host is asked to relayout
        only if it differs.
        """
        params = self._params.with_changes(**changes)
        spread = SpreadCalculator.compute(params)
        changed = params.changed_fields(self._params)
        self._params = params

        if 'radius' in changed:
            self._blur = self._blur.with_radius(params.radius)
        self._tracker.invalidate_fields(changed)
        self._apply_spread(spread)

    def set_params(self, params: ShadowParameters) -> None:
        """Replace all parameters at once."""
        self.update(**{name: getattr(params, name) for name in ShadowParameters.FIELDS})

    def _apply_spread(self, spread: SpreadResult) -> None:
        padding_changed = spread.padding != self._spread.padding
        self._spread = spread
        if padding_changed:
            logger.debug(f"Shadow padding changed to {spread.padding.as_tuple()}")
            self.request_layout()

    # =========================================================================
    # Layout
    # =========================================================================

    @property
    def padding_request(self) -> Expansion:
        """Space the host must reserve around the content."""
        return self._spread.padding

    @property
    def spread_extents(self) -> tuple[int, int]:
        """Signed (width, height) growth of the painted shadow rectangle."""
        return self._spread.spread_extents

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def on_bounds_changed(self, width: int, height: int) -> None:
        """Host layout hook: the content now measures ``width`` x ``height``."""
        bounds = Bounds.of(width, height)
        if bounds == self._bounds:
            return
        self._bounds = bounds
        self._tracker.invalidate(DirtyTrigger.BOUNDS)

    def request_layout(self) -> None:
        """Invalidate the shadow and ask the host for a new layout pass."""
        self._tracker.invalidate(DirtyTrigger.LAYOUT)
        if self._request_relayout is not None:
            self._request_relayout()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def is_dirty(self) -> bool:
        return self._tracker.is_dirty

    @property
    def tracker(self) -> DirtyTracker:
        return self._tracker

    @property
    def has_placeholder(self) -> bool:
        return self._capture.is_placeholder

    @property
    def blur_filter(self) -> GaussianBlur:
        """Blur stage for the current radius."""
        return self._blur

    @property
    def cached_raster(self) -> CachedShadowRaster | None:
        return self._cache

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw(self, surface: Surface) -> bool:
        """Paint the shadow (if enabled) and the content onto ``surface``.

        :param surface: Destination canvas with the content origin
        :return: True if a shadow was painted this frame
        """
        painted = False
        if self._params.enabled:
            if self._tracker.is_dirty:
                self._refresh_shadow()
            painted = self._paint_shadow(surface)
        self._paint_content(surface)
        return painted

    def _refresh_shadow(self) -> None:
        if self._bounds.is_empty:
            # Stay dirty until a real size arrives
            self._capture.install_placeholder()
            self._cache = None
            return

        start = time.perf_counter()
        try:
            raster = self._capture.capture(self._bounds, self._render_content_into)
            silhouette = self._extract.apply(raster)
            blurred = self._blur.apply(silhouette, max_pixels=self._max_pixels)
            self._cache = self._build_cache(tint_mask(blurred.image, self._params.color), -blurred.offset_x)
        except ShadowAllocationError as e:
            logger.warning(f"Shadow disabled for this frame: {e}")
            self._cache = None
            return

        self._tracker.mark_clean()
        self.pipeline_runs += 1
        logger.debug(
            f"Shadow pipeline #{self.pipeline_runs} for {self._bounds.width}x{self._bounds.height} "
            f"took {(time.perf_counter() - start) * 1000:.1f} ms"
        )

    def _build_cache(self, shadow: np.ndarray, margin: int) -> CachedShadowRaster | None:
        """Scale the tinted shadow to its destination rectangle."""
        width, height = self._bounds.size
        width_spread, height_spread = self._spread.spread_extents
        params = self._params

        left = params.offset_x - width_spread
        top = params.offset_y - height_spread
        right = width + width_spread + params.offset_x
        bottom = height + height_spread + params.offset_y
        if right <= left or bottom <= top:
            # Shrunk away entirely
            return CachedShadowRaster(
                image=np.zeros((0, 0, 4), dtype=np.uint8), x=0, y=0, bounds=self._bounds, params=params,
            )

        scale_x = (right - left) / width
        scale_y = (bottom - top) / height
        dest_w = max(1, int(round((width + 2 * margin) * scale_x)))
        dest_h = max(1, int(round((height + 2 * margin) * scale_y)))
        if dest_w * dest_h > self._max_pixels:
            raise ShadowAllocationError(f"Scaled shadow of {dest_w}x{dest_h} exceeds {self._max_pixels} pixels")

        if (dest_h, dest_w) != shadow.shape[:2]:
            try:
                scaled = PILImage.fromarray(shadow).resize((dest_w, dest_h), PILImage.Resampling.BILINEAR)
                shadow = np.array(scaled, dtype=np.uint8)
            except MemoryError as e:
                raise ShadowAllocationError(f"Could not scale shadow to {dest_w}x{dest_h}: {e}") from e

        return CachedShadowRaster(
            image=shadow,
            x=int(round(left - margin * scale_x)),
            y=int(round(top - margin * scale_y)),
            bounds=self._bounds,
            params=params,
        )

    def _paint_shadow(self, surface: Surface) -> bool:
        cache = self._cache
        if cache is None or cache.image.size == 0:
            return False
        blend_over(surface.pixels, cache.image, surface.origin_x + cache.x, surface.origin_y + cache.y)
        return True

    def _paint_content(self, surface: Surface) -> None:
        if self._bounds.is_empty:
            return
        frame = self._frame_buffer
        if frame is None or frame.shape[:2] != (self._bounds.height, self._bounds.width):
            frame = np.zeros((self._bounds.height, self._bounds.width, 4), dtype=np.uint8)
            self._frame_buffer = frame
        else:
            frame.fill(0)
        self._render_content_into(frame)
        blend_over(surface.pixels, frame, surface.origin_x, surface.origin_y)

    # =========================================================================
    # Teardown
    # =========================================================================

    def release(self) -> None:
        """Free the off-screen buffers and the cached shadow.

        The compositor stays usable; the next draw recomputes the shadow.
        """
        self._capture.release()
        self._cache = None
        self._frame_buffer = None
        self._tracker.invalidate(DirtyTrigger.LAYOUT)

    def __enter__(self) -> 'ShadowCompositor':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return (
            f"ShadowCompositor(bounds={self._bounds.width}x{self._bounds.height}, "
            f"state={self._tracker.state.value}, params={self._params!r})"
        )
