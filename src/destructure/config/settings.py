"""Application settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from destructure.core.sequence import SequenceStrategy


class MatcherSettings(BaseSettings):
    """Pattern compiler defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DESTRUCTURE_",
        case_sensitive=False,
        extra="ignore",
    )

    sequence_strategy: SequenceStrategy = Field(default=SequenceStrategy.STRICT)


class RewriteSettings(BaseSettings):
    """Rewrite engine settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DESTRUCTURE_",
        case_sensitive=False,
        extra="ignore",
    )

    rewrite_max_passes: int = Field(default=100, ge=1)


class Settings(MatcherSettings, RewriteSettings):
    """Unified settings - composition of all component settings."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)


def load_settings(**overrides: Any) -> Settings:
    """Load unified settings, applying explicit overrides."""
    return Settings(**overrides)
