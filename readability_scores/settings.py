"""
Configuration management for the readability scorer.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings and configuration."""

    # Application Info
    app_name: str = "Readability Scores"
    app_version: str = "1.0.0"

    # Logging Configuration
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Word List Configuration
    spache_word_list_path: Optional[Path] = Field(
        default=None, description="Replacement file for the packaged Spache word list"
    )
    dale_chall_word_list_path: Optional[Path] = Field(
        default=None, description="Replacement file for the packaged Dale-Chall word list"
    )
    preload_word_lists: bool = Field(
        default=False, description="Build both stem indexes when a scorer is created"
    )

    class Config:
        env_prefix = "READABILITY_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
