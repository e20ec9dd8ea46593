"""
Padding and spread derivation.

The shadow needs room around the content: the offset pushes it out on one
side, the blur softens it by roughly ``radius`` and a positive spread grows
it further. The padding is reserved symmetrically on both sides of each
axis so the content stays centered regardless of the offset sign.

Spread extents are ``2 * spread`` per axis, except that a zero horizontal
offset collapses the *height* extent to ``spread`` and a zero vertical
offset collapses the *width* extent to ``spread``. The cross-axis coupling
is kept for compatibility with existing layouts.

Spread extents are truncated toward zero like an integer cast. Padding is
rounded up so it never reserves less than the offset plus the radius.
"""

from dataclasses import dataclass
import math

from .base import Expansion
from .shadow_parameters import ShadowParameters


@dataclass(frozen=True)
class SpreadResult:
    """Padding to reserve plus the signed spread extents of the painted shadow."""
    padding: Expansion
    width_spread: int
    height_spread: int

    @property
    def spread_extents(self) -> tuple[int, int]:
        return (self.width_spread, self.height_spread)


class SpreadCalculator:
    """Pure mapping from ShadowParameters to padding and spread extents."""

    @staticmethod
    def spread_extents(params: ShadowParameters) -> tuple[int, int]:
        """Unclamped (width, height) growth of the painted shadow rectangle."""
        width_spread = int(2 * params.spread)
        height_spread = int(2 * params.spread)
        if params.offset_x == 0:
            height_spread = int(params.spread)
        if params.offset_y == 0:
            width_spread = int(params.spread)
        return width_spread, height_spread

    @classmethod
    def compute(cls, params: ShadowParameters) -> SpreadResult:
        width_spread, height_spread = cls.spread_extents(params)

        # A shrinking spread never reduces the reserved space
        expand_width = max(width_spread, 0)
        expand_height = max(height_spread, 0)
        horizontal = math.ceil(abs(params.offset_x) + params.radius + expand_width)
        vertical = math.ceil(abs(params.offset_y) + params.radius + expand_height)

        padding = Expansion(left=horizontal, top=vertical, right=horizontal, bottom=vertical)
        return SpreadResult(padding=padding, width_spread=width_spread, height_spread=height_spread)
