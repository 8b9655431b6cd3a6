"""
Configuration management for the DEX aggregator clients.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]

ODOS_BASE_URL = "https://api.odos.xyz"
KYBERSWAP_BASE_URL = "https://aggregator-api.kyberswap.com"
KYBERSWAP_DEFAULT_CHAIN = "ethereum"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        env_ignore_empty=True,
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
    )

    app_name: str = "DEX Aggregator Clients"
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")

    # Logging Configuration
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="logs/dexagg.log", validation_alias="LOG_FILE")

    # Odos Configuration
    odos_base_url: str = Field(default=ODOS_BASE_URL, validation_alias="ODOS_BASE_URL")

    # KyberSwap Configuration
    kyberswap_base_url: str = Field(default=KYBERSWAP_BASE_URL, validation_alias="KYBERSWAP_BASE_URL")
    kyberswap_chain: str = Field(default=KYBERSWAP_DEFAULT_CHAIN, validation_alias="KYBERSWAP_CHAIN")

    # HTTP Configuration
    http_timeout_seconds: float = Field(default=10.0, validation_alias="HTTP_TIMEOUT_SECONDS")

    @field_validator("odos_base_url", "kyberswap_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("kyberswap_chain")
    @classmethod
    def normalise_chain(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be positive")
        return value


settings = Settings()
