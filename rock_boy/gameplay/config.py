"""
Configuration management for Rock Boy.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    VIEWPORT_WIDTH, VIEWPORT_HEIGHT, LEVEL_WIDTH_SCREENS, GENERATION_STEP,
    LOOK_AHEAD, CLEANUP_DISTANCE, MAX_GENERATION_ITERATIONS, MAX_WORLD_LEVEL,
    REFERENCE_FPS,
)


class Settings(BaseSettings):
    """Game settings loaded from environment variables (ROCK_BOY_*)."""

    model_config = SettingsConfigDict(
        env_prefix="ROCK_BOY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Viewport
    viewport_width: int = Field(default=VIEWPORT_WIDTH, description="Viewport width in pixels")
    viewport_height: int = Field(default=VIEWPORT_HEIGHT, description="Viewport height in pixels")

    # World
    infinite_world: bool = Field(
        default=True,
        description="Procedurally extend the world in both directions instead of a fixed level"
    )
    level_width_screens: int = Field(
        default=LEVEL_WIDTH_SCREENS,
        description="Width of the finite level, in viewports"
    )
    max_world_level: int = Field(
        default=MAX_WORLD_LEVEL,
        description="World level at which reaching the final evolution completes the game"
    )

    # Procedural generation. The step is checked by the generator at runtime.
    generation_step: float = Field(
        default=GENERATION_STEP,
        description="Width of one generated world segment"
    )
    look_ahead: float = Field(
        default=LOOK_AHEAD,
        description="Distance around the player that must always be generated"
    )
    cleanup_distance: float = Field(
        default=CLEANUP_DISTANCE,
        description="Entities entirely farther than this from the player are removed"
    )
    max_generation_iterations: int = Field(
        default=MAX_GENERATION_ITERATIONS,
        description="Segments generated per side per tick, at most"
    )

    # Runtime
    seed: Optional[int] = Field(default=None, description="Seed for the random source")
    target_fps: int = Field(default=REFERENCE_FPS)
    debug_mode: bool = Field(
        default=False,
        description="Enable debug level up / level down controls and the debug panel"
    )
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def check_cleanup_window(self) -> "Settings":
        # Cleanup must never reach content inside the look-ahead window
        if self.cleanup_distance < self.look_ahead:
            raise ValueError(
                f"cleanup_distance ({self.cleanup_distance}) must be >= look_ahead ({self.look_ahead})"
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
