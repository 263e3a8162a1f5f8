"""Translator configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TranslatorSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PHRASEBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_language: str = Field(default="en", description="Language used when a call names none.")
    context_wrapper: str | list[str] = Field(
        default="%",
        description="Placeholder delimiter, or an [opening, closing] pair.",
    )

    @field_validator("context_wrapper")
    @classmethod
    def _check_pair_length(cls, value):
        if isinstance(value, list) and len(value) > 2:
            raise ValueError("context_wrapper takes at most an opening and a closing delimiter")
        return value


@lru_cache
def get_settings() -> TranslatorSettings:
    """Return cached settings instance."""

    return TranslatorSettings()


__all__ = ["TranslatorSettings", "get_settings"]
