from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GALLERY_", extra="ignore")

    env: str = "dev"
    log_level: str = "INFO"

    api_base_url: str = "http://localhost:8080"
    upload_path: str = "/api/artworks"
    hello_path: str = "/api/hello"
    image_path: str = "/api/artworks/images/{image_id}"
    thumbnail_path: str = "/api/artworks/images/{image_id}/thumb"

    # None means the transport decides when a request has failed
    request_timeout_seconds: float | None = None


def load_settings(config_path: Path | None = None) -> Settings:
    if config_path is None:
        return Settings()

    if not config_path.exists():
        logger.warning(
            f"Config file not found at {config_path}, using defaults")
        return Settings()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(
            f"Failed to load config from {config_path}: {e}. Falling back to defaults.")
        return Settings()

    if not data:
        return Settings()
    return Settings(**data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    config_file = os.getenv("GALLERY_CONFIG_FILE")
    if config_file:
        return load_settings(Path(config_file))
    return Settings()
