"""PIL-based headless shadow host."""

from .shadow_view_pil import ShadowViewPil

__all__ = ['ShadowViewPil']
