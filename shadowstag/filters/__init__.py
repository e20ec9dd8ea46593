# ShadowStag Filters
"""
Raster filters used by the shadow pipeline.

- ExtractAlpha: opacity footprint (silhouette) of a raster
- GaussianBlur: radius-parameterized blur of a silhouette
"""

from .base import Filter, FILTER_REGISTRY, register_filter
from .channels import ExtractAlpha
from .blur import GaussianBlur, radius_to_sigma

__all__ = [
    "Filter",
    "FILTER_REGISTRY",
    "register_filter",
    "ExtractAlpha",
    "GaussianBlur",
    "radius_to_sigma",
]
