"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from (in priority order):
1. CLI flags (highest priority)
2. Environment variables (ADVENTURE_ENGINE_*)
3. Defaults (lowest priority)

The engine itself never reads settings; build_game() and the CLI pass the
relevant values into Game explicitly.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from adventure_engine.engine.macros import DEFAULT_MAX_DEPTH


class Settings(BaseSettings):
    """Main application settings."""

    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".adventure-engine",
        description="Directory for worlds, saves and other data",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    max_macro_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        gt=0,
        description="Maximum nesting of macro expansion",
    )
    compress_content: bool = Field(
        default=False,
        description="Keep content items zlib-compressed in memory",
    )

    model_config = {"env_prefix": "ADVENTURE_ENGINE_"}

    def ensure_data_dir(self) -> Path:
        """Ensure data directory exists and return it."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir

    def saves_dir(self) -> Path:
        """Get the saves directory."""
        saves = self.ensure_data_dir() / "saves"
        saves.mkdir(exist_ok=True)
        return saves


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings()
