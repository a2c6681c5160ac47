"""Application configuration using pydantic-settings.

Covers the composite boost swap constants and the handoff polling window.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")
    dry_run: bool = Field(default=True, description="Use simulated swap legs")
    default_network: str = Field(default="mainnet", description="Network used when none is given")

    # ======================
    # Boost swap
    # ======================
    boost_slippage_percentage: int = Field(
        default=3, description="Slippage applied to both legs of a boost swap (percent)"
    )

    # ======================
    # Leg handoff polling
    # ======================
    claim_poll_interval_min_seconds: float = Field(
        default=15.0, description="Lower bound of the claim confirmation poll interval"
    )
    claim_poll_interval_max_seconds: float = Field(
        default=30.0, description="Upper bound of the claim confirmation poll interval"
    )
    claim_poll_max_attempts: int = Field(
        default=4, description="Polls per tick before giving control back to the caller"
    )

    # ======================
    # Dry-run legs
    # ======================
    simulated_gas_units: int = Field(
        default=200000, description="Gas units charged per simulated transaction"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def boost_slippage_bps(self) -> int:
        """Composite slippage in basis points."""
        return self.boost_slippage_percentage * 100

    def get_safe_dict(self) -> dict:
        """Return settings as a plain dict for diagnostics."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "dry_run": self.dry_run,
            "default_network": self.default_network,
            "boost": {
                "slippage_percentage": self.boost_slippage_percentage,
                "slippage_bps": self.boost_slippage_bps,
            },
            "claim_polling": {
                "interval_min": self.claim_poll_interval_min_seconds,
                "interval_max": self.claim_poll_interval_max_seconds,
                "max_attempts": self.claim_poll_max_attempts,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
