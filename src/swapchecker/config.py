"""Application configuration using pydantic-settings."""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from swapchecker.assets import Network


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    # ======================
    # Trading
    # ======================
    supported_network: Network = Field(
        default=Network.ETHEREUM,
        description="The only network users may be onboarded on",
    )
    default_slippage: Decimal = Field(
        default=Decimal("0.005"),
        ge=0,
        description="Placeholder slippage reported with every swap (0.5%)",
    )

    # ======================
    # Onboarding
    # ======================
    starting_balance_min: int = Field(
        default=1000, ge=0, description="Lowest randomized starting balance per token"
    )
    starting_balance_max: int = Field(
        default=100000, ge=0, description="Highest randomized starting balance per token"
    )

    # ======================
    # Safety Guards
    # ======================
    lock_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Max wait for a wallet lock during a swap"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_safe_dict(self) -> dict:
        """Return settings dict suitable for health output."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "trading": {
                "supported_network": self.supported_network.value,
                "slippage": str(self.default_slippage),
            },
            "onboarding": {
                "starting_balance_min": self.starting_balance_min,
                "starting_balance_max": self.starting_balance_max,
            },
            "safety": {
                "lock_timeout_seconds": self.lock_timeout_seconds,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
