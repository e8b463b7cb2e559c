"""Application configuration loaded from environment variables and .env file."""

import math

from pydantic_settings import BaseSettings, SettingsConfigDict

# Smallest positive float: the weight gate only skips exact repeats
WEIGHT_EPSILON = math.ulp(0.0)


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"

    # Viewpoint rig defaults (degrees)
    RIG_MIN_ANGLE_FWD: float = 10.0
    RIG_MAX_ANGLE_FWD: float = 30.0
    RIG_MIN_ANGLE_UP: float = 30.0
    RIG_MAX_ANGLE_UP: float = 60.0

    RIG_EASE_CURVE: str = "ease"
    RIG_WEIGHT_EPSILON: float = WEIGHT_EPSILON
    RIG_BUILD_DEFAULT: bool = True


settings = Settings()
