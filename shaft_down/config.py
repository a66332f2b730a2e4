"""
Configuration management for Shaft Down.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Shell settings loaded from environment variables (SHAFT_DOWN_*)."""

    # Simulation
    seed: Optional[int] = Field(
        default=None,
        description="Fixed random seed. None seeds from the wall clock"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )

    # Display
    scale: int = Field(
        default=1,
        ge=1,
        description="Integer pixel scale applied to the 640x480 screen"
    )
    max_fps: int = Field(
        default=0,
        ge=0,
        description="Frame rate cap. 0 means uncapped"
    )
    show_fps: bool = Field(
        default=True,
        description="Draw the measured frame rate in the corner"
    )

    # Audio
    resource_dir: str = Field(
        default="resources",
        description="Directory holding sound/ with the .wav cues and music"
    )
    sound_enabled: bool = Field(
        default=True,
        description="Initialise the mixer and play sound cues"
    )
    music_file: str = Field(
        default="dark3.it",
        description="Background music file inside <resource_dir>/sound"
    )

    class Config:
        env_prefix = "SHAFT_DOWN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    """
    return Settings()
