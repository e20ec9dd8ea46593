"""Exception classes for shadow rendering."""


class ShadowError(Exception):
    """Base exception for shadow rendering errors."""

    pass


class ShadowAllocationError(ShadowError):
    """Raised when an off-screen shadow buffer cannot be allocated."""

    pass
