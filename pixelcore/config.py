"""Library configuration."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """PixelCore settings, overridable through ``PIXELCORE_*`` environment variables."""

    # Fixed-point arithmetic
    FIXED_POINT_SHIFT: int = Field(default=16, ge=1, le=30)  # SCALE = 2 ** SHIFT

    # Platform bridging
    IMAGE_FACTORY: Literal["default", "pil"] = "default"

    model_config = {"env_prefix": "PIXELCORE_"}


settings = Settings()
