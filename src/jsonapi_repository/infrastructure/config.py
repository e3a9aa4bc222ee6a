"""Library configuration: loaded from ``JSONAPI_*`` environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Repository defaults loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="JSONAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_uri: str | None = None
    api_token: SecretStr | None = None
    timeout_seconds: float = 30.0
    entity_response: bool = False
    full_response: bool = False
    log_level: str = "INFO"

    def default_headers(self) -> dict[str, str]:
        """Static headers every repository built from these settings sends."""
        headers: dict[str, str] = {}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token.get_secret_value()}"
        return headers


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton settings (cached after first call)."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Install a root handler at the configured level, for scripts and demos."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
