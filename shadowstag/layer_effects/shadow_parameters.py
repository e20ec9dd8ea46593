"""
Shadow parameters.

Immutable record of everything that shapes the shadow: whether it is drawn,
the blur radius, the offset, the spread and the tint color. Any change
produces a new instance, which keeps each update atomic for the compositor.

Uses Pydantic with camelCase aliases so parameters round-trip through
style dictionaries (``offsetX``/``offsetY``).
"""

import math
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..color import DKGRAY, RGBA8, color_alpha, color_to_hex, parse_color
from ..config import ShadowSettings

# Default shadow values
DEFAULT_SHADOW_RADIUS = 30.0
DEFAULT_SHADOW_DX = 15.0
DEFAULT_SHADOW_DY = 15.0
DEFAULT_SHADOW_SPREAD = 0.0
DEFAULT_SHADOW_COLOR: RGBA8 = DKGRAY

# A zero-radius blur is degenerate
MIN_RADIUS = 0.1
# Radius, offsets and spread are clamped to this magnitude
MAX_EXTENT = 1_000_000.0


class ShadowParameters(BaseModel):
    """
    Drop shadow configuration.

    Example:
        >>> params = ShadowParameters(radius=8, offset_x=4, offset_y=6, color='#00000080')
        >>> params.shadow_alpha
        128
        >>> params.with_changes(radius=0).radius
        0.1
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    FIELDS: ClassVar[tuple[str, ...]] = (
        'enabled', 'radius', 'offset_x', 'offset_y', 'spread', 'color',
    )

    enabled: bool = Field(default=True)
    radius: float = Field(default=DEFAULT_SHADOW_RADIUS)
    offset_x: float = Field(default=DEFAULT_SHADOW_DX, alias='offsetX')
    offset_y: float = Field(default=DEFAULT_SHADOW_DY, alias='offsetY')
    spread: float = Field(default=DEFAULT_SHADOW_SPREAD)
    color: RGBA8 = Field(default=DEFAULT_SHADOW_COLOR)

    @field_validator('radius', mode='before')
    @classmethod
    def _clamp_radius(cls, value: Any) -> float:
        value = float(value)
        if not math.isfinite(value):
            return MIN_RADIUS
        return min(MAX_EXTENT, max(MIN_RADIUS, value))

    @field_validator('offset_x', 'offset_y', 'spread', mode='before')
    @classmethod
    def _finite_geometry(cls, value: Any) -> float:
        # inf and nan have no pixel extent
        value = float(value)
        if not math.isfinite(value):
            return 0.0
        return min(MAX_EXTENT, max(-MAX_EXTENT, value))

    @field_validator('color', mode='before')
    @classmethod
    def _normalize_color(cls, value: Any) -> RGBA8:
        return parse_color(value)

    @field_serializer('color')
    def _serialize_color(self, color: RGBA8) -> str:
        return color_to_hex(color)

    @property
    def shadow_alpha(self) -> int:
        """Target shadow opacity (0-255), taken from the color's alpha channel."""
        return color_alpha(self.color)

    def with_changes(self, **changes: Any) -> 'ShadowParameters':
        """Return a validated copy with the given fields replaced."""
        unknown = set(changes) - set(self.FIELDS)
        if unknown:
            raise AttributeError(f"Unknown shadow parameter(s): {', '.join(sorted(unknown))}")
        data = {name: getattr(self, name) for name in self.FIELDS}
        data.update(changes)
        return ShadowParameters.model_validate(data)

    def changed_fields(self, other: 'ShadowParameters') -> list[str]:
        """Names of the fields whose value differs from ``other``."""
        return [name for name in self.FIELDS if getattr(self, name) != getattr(other, name)]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a camelCase dictionary with the color as ``#RRGGBBAA``."""
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShadowParameters':
        """Reconstruct parameters from ``to_dict()`` output or snake_case keys."""
        return cls.model_validate(data)

    @classmethod
    def from_settings(cls, settings: Optional[ShadowSettings] = None) -> 'ShadowParameters':
        """Build default parameters from configuration."""
        if settings is None:
            from ..config import settings as default_settings
            settings = default_settings
        return cls(
            enabled=settings.DEFAULT_ENABLED,
            radius=settings.DEFAULT_RADIUS,
            offset_x=settings.DEFAULT_OFFSET_X,
            offset_y=settings.DEFAULT_OFFSET_Y,
            spread=settings.DEFAULT_SPREAD,
            color=settings.DEFAULT_COLOR,
        )

    def __repr__(self) -> str:
        return (
            f"ShadowParameters(enabled={self.enabled}, radius={self.radius}, "
            f"offset=({self.offset_x}, {self.offset_y}), spread={self.spread}, "
            f"color={color_to_hex(self.color)})"
        )
