# ShadowStag Filters - Base Classes
"""
Base classes for the filter system.

Filters are dataclasses operating on numpy rasters, with dictionary
serialization support.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any, ClassVar
import json

import numpy as np

# Global registry
FILTER_REGISTRY: dict[str, type['Filter']] = {}


def register_filter(cls: type['Filter']) -> type['Filter']:
    """Decorator to register a filter class."""
    FILTER_REGISTRY[cls.__name__] = cls
    # Also register lowercase version
    FILTER_REGISTRY[cls.__name__.lower()] = cls
    return cls


@dataclass
class Filter(ABC):
    """Base class for all filters.

    Example:
        @register_filter
        @dataclass
        class Invert(Filter):
            def apply(self, image: np.ndarray) -> np.ndarray:
                return 255 - image
    """

    # Primary parameter name (e.g., 'radius' for GaussianBlur)
    _primary_param: ClassVar[str | None] = None

    @abstractmethod
    def apply(self, image: np.ndarray) -> Any:
        """Apply filter to a raster and return the result.

        :param image: The input raster to process.
        :returns: The processed raster.
        """
        pass

    def __call__(self, image: np.ndarray) -> Any:
        return self.apply(image)

    @property
    def type(self) -> str:
        """Filter type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        """Serialize filter to dictionary."""
        data = {}
        # Only include fields that are actual dataclass fields
        for f in fields(self):
            if not f.name.startswith('_'):
                data[f.name] = getattr(self, f.name)
        data['type'] = self.type
        return data

    def to_json(self) -> str:
        """Serialize filter to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Filter':
        """Deserialize filter from dictionary."""
        data = data.copy()  # Don't modify original
        filter_type = data.pop('type', cls.__name__)

        # Find filter class
        filter_cls = FILTER_REGISTRY.get(filter_type) or FILTER_REGISTRY.get(filter_type.lower())
        if filter_cls is None:
            raise ValueError(f"Unknown filter type: {filter_type}")

        return filter_cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> 'Filter':
        """Deserialize filter from JSON string."""
        return cls.from_dict(json.loads(json_str))
