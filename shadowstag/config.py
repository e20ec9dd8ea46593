"""Library configuration."""

from pydantic_settings import BaseSettings


class ShadowSettings(BaseSettings):
    """Shadow defaults and resource limits, overridable via SHADOWSTAG_* env vars."""

    # Parameter defaults
    DEFAULT_ENABLED: bool = True
    DEFAULT_RADIUS: float = 30.0
    DEFAULT_OFFSET_X: float = 15.0
    DEFAULT_OFFSET_Y: float = 15.0
    DEFAULT_SPREAD: float = 0.0
    DEFAULT_COLOR: str = "#444444FF"  # dark gray, opaque

    # Resource limits
    MAX_BUFFER_PIXELS: int = 4096 * 4096  # Largest off-screen shadow buffer

    model_config = {"env_prefix": "SHADOWSTAG_"}


settings = ShadowSettings()
