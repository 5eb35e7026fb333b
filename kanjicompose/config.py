"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    kanjicompose_env: str = "development"
    kanjicompose_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # GlyphWiki
    glyphwiki_base_url: str = "https://glyphwiki.org"
    fetch_timeout: float = 10.0

    # Composition
    default_area_factor: float = 1.0
    # Fixed seed makes random composition reproducible; None = system entropy
    random_seed: int | None = None

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
