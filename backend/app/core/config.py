"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union
from decimal import Decimal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Splitting"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Settlement
    SETTLEMENT_TOLERANCE: Decimal = Decimal("0.01")  # Balances within +/- this are considered settled
    SETTLEMENT_DECIMALS: int = 2  # Decimal places of emitted settlement amounts
    CURRENCY_LABEL: str = "USD"  # Label only, no conversion is performed

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
