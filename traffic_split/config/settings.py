"""Application settings using Pydantic for environment-based configuration."""
from functools import lru_cache
from typing import List, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GATEWAY_WEIGHTS = (
    "paypal_payment_gateway=25,"
    "przelewy24_payment_gateway=25,"
    "tpay_payment_gateway=25,"
    "volt_payment_gateway=25"
)


def parse_gateway_weights(value: str) -> List[Tuple[str, int]]:
    """
    Parse "code=weight,code=weight" into ordered pairs.

    Only the format is checked here. Whether the weights are positive and
    add up to 100 is decided when the routing table is built.

    Raises:
        ValueError: If a pair is malformed or a weight is not an integer
    """
    pairs: List[Tuple[str, int]] = []
    for raw_pair in value.split(","):
        raw_pair = raw_pair.strip()
        if not raw_pair:
            continue
        code, sep, raw_weight = raw_pair.partition("=")
        code = code.strip()
        if not sep or not code:
            raise ValueError(f"Invalid gateway weight '{raw_pair}'. Expected 'code=weight'")
        try:
            weight = int(raw_weight.strip())
        except ValueError:
            raise ValueError(
                f"Invalid weight for gateway '{code}': '{raw_weight.strip()}' is not an integer"
            ) from None
        pairs.append((code, weight))
    return pairs


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Configuration
    app_name: str = Field(default="traffic-split", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON (console renderer otherwise)")

    # Routing Configuration
    gateway_weights: str = Field(
        default=DEFAULT_GATEWAY_WEIGHTS,
        description="Gateway split as comma-separated code=weight pairs, in routing order",
    )
    random_seed: Optional[int] = Field(
        default=None, description="Seed for reproducible routing (simulations only)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRAFFIC_SPLIT_",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    @field_validator("gateway_weights")
    @classmethod
    def validate_gateway_weights(cls, v: str) -> str:
        """Reject malformed code=weight pairs early."""
        parse_gateway_weights(v)
        return v

    def get_gateway_weights(self) -> List[Tuple[str, int]]:
        """Parse gateway weights into ordered (code, weight) pairs."""
        return parse_gateway_weights(self.gateway_weights)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
