"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """LaunchGuard configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="LaunchGuard", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Solana RPC (on-chain token analysis)
    solana_rpc_url: str = Field(
        default="https://api.mainnet-beta.solana.com",
        description="Solana RPC endpoint URL",
    )
    rpc_timeout_seconds: float = Field(
        default=5.0, gt=0, description="Timeout for a single RPC call"
    )
    rpc_max_retries: int = Field(
        default=3, ge=1, le=10, description="Attempts per RPC call before giving up"
    )

    # Circuit Breaker
    circuit_breaker_threshold: int = Field(
        default=5, ge=1, description="Failures before circuit opens"
    )
    circuit_breaker_cooldown: int = Field(
        default=30, ge=1, description="Seconds before half-open"
    )

    # Launch protection
    purchase_cooldown_seconds: int = Field(
        default=60, ge=0, description="Minimum seconds between purchases by one wallet"
    )
    transaction_history_limit: int = Field(
        default=100, ge=1, description="Recorded transactions kept per wallet"
    )
    whitelist_early_access_minutes: int = Field(
        default=5, gt=0, description="Minutes of whitelist-only access before public launch"
    )
    max_purchase_amount_threshold: float = Field(
        default=1_000_000_000,
        gt=0,
        description="Single purchase size treated as exceeding the wallet cap",
    )
    known_bot_addresses: list[str] = Field(
        default_factory=list, description="Wallets flagged as bots at startup"
    )

    @field_validator("solana_rpc_url")
    @classmethod
    def validate_solana_rpc_url(cls, v: str) -> str:
        """Validate Solana RPC URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Solana RPC URL must start with http:// or https://")
        return v

    @field_validator("known_bot_addresses")
    @classmethod
    def strip_bot_addresses(cls, v: list[str]) -> list[str]:
        """Drop blank entries and surrounding whitespace."""
        return [address.strip() for address in v if address.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
