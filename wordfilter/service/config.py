# wordfilter/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

from pathlib import Path
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordfilter.core.definitions import Defaults, Script

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'WORDFILTER_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORDFILTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    replacement: str = Field(
        default=Defaults.REPLACEMENT,
        description="Token substituted for every masked keyword occurrence.",
    )

    word_list_path: Optional[Path] = Field(
        default=None,
        description="Line-delimited keyword file. The bundled list is used when unset.",
    )

    matchable_scripts: List[str] = Field(
        default_factory=lambda: [Script.CJK],
        description="Scripts from charsets.yaml whose characters take part in matching.",
    )

    log_level: str = Field(default="INFO", description="Root logging level.")

    @field_validator("replacement")
    @classmethod
    def validate_replacement(cls, v: str) -> str:
        """Ensure the replacement token is not empty."""
        if not v:
            raise ValueError("Replacement token cannot be empty")
        return v

    @field_validator("matchable_scripts")
    @classmethod
    def validate_scripts(cls, v: List[str]) -> List[str]:
        """Ensure at least one script is configured."""
        if not v:
            raise ValueError("At least one matchable script is required")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {LOG_LEVELS}")
        return level


# Singleton settings instance
settings = Settings()
