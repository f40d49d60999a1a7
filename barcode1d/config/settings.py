"""
Library settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package-wide defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Bar string alphabet
    line_character: str = Field("1", min_length=1, max_length=1, description="Character for a bar unit")
    space_character: str = Field("0", min_length=1, max_length=1, description="Character for a space unit")

    # Wide/narrow alphabet
    w_character: str = Field("w", min_length=1, max_length=1, description="Character for a wide run")
    n_character: str = Field("n", min_length=1, max_length=1, description="Character for a narrow run")
    wn_ratio: int = Field(2, ge=2, le=9, description="Wide to narrow width ratio")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    def pattern_defaults(self) -> dict[str, Any]:
        """Option defaults shared by every symbology."""
        return {
            "line_character": self.line_character,
            "space_character": self.space_character,
            "w_character": self.w_character,
            "n_character": self.n_character,
            "wn_ratio": self.wn_ratio,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()
