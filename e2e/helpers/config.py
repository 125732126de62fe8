"""
Configuration loaded from environment variables
Artifact endpoints and download options can be overridden via .env
"""

import logging
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path


DEFAULT_BINARY_URL_TEMPLATE = (
    "https://hydra.iohk.io/job/Cardano/cardano-wallet/"
    "cardano-wallet-{os}64/latest/download-by-type/file/binary-dist"
)
DEFAULT_CONFIGS_BASE_URL = (
    "https://hydra.iohk.io/job/Cardano/cardano-node/"
    "cardano-deployment/latest-finished/download/1"
)


# Find .env file - could be in current dir, parent (project root), or set via env
def _find_env_file() -> str:
    """Find .env file in current or parent directory"""
    if Path(".env").exists():
        return ".env"
    # Running from e2e/
    parent_env = Path(__file__).parent.parent.parent / ".env"
    if parent_env.exists():
        return str(parent_env)
    return ".env"


class Settings(BaseSettings):
    """Helper settings from environment"""

    # Artifact endpoints
    BINARY_URL_TEMPLATE: str = DEFAULT_BINARY_URL_TEMPLATE
    CONFIGS_BASE_URL: str = DEFAULT_CONFIGS_BASE_URL

    # Downloads
    DOWNLOAD_TIMEOUT_SECONDS: Optional[float] = None  # None blocks until done
    DOWNLOAD_FOLLOW_REDIRECTS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = _find_env_file()
        case_sensitive = True


def validate_settings(active_settings: Settings) -> None:
    """Validate artifact endpoints and download options."""
    errors = []

    for field_name in ("BINARY_URL_TEMPLATE", "CONFIGS_BASE_URL"):
        value = getattr(active_settings, field_name, "")
        if not isinstance(value, str) or not value.startswith(("http://", "https://")):
            errors.append(f"{field_name} must be an http(s) URL")

    if "{os}" not in active_settings.BINARY_URL_TEMPLATE:
        errors.append("BINARY_URL_TEMPLATE must contain an {os} placeholder")

    timeout = active_settings.DOWNLOAD_TIMEOUT_SECONDS
    if timeout is not None and timeout <= 0:
        errors.append("DOWNLOAD_TIMEOUT_SECONDS must be > 0 when set")

    if not isinstance(logging.getLevelName(active_settings.LOG_LEVEL.upper()), int):
        errors.append("LOG_LEVEL must be a standard logging level name")

    if errors:
        raise ValueError("Invalid helper configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached, validated settings instance"""
    active_settings = Settings()
    validate_settings(active_settings)
    return active_settings


settings = get_settings()
