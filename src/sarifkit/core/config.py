# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Codec defaults via environment variables and .env files."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sarifkit.core.constants import LOG_FORMATS, SARIF_SCHEMA_URI


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SARIFKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Encoding
    json_indent: int = 2  # <= 0 writes a single line
    exclude_unset: bool = False
    schema_uri: str = SARIF_SCHEMA_URI

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def _parse_log_format(cls, v: object) -> str:
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v


def get_settings() -> Settings:
    return Settings()
