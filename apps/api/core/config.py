"""Centralized application configuration via Pydantic Settings.

Loads all env vars into a typed Settings instance, including which message
style this deployment parses and where expenses are stored.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from packages.notification_engine import SourceStyle


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Shared secret the forwarding agent sends with every message
    API_SECRET: str = Field(default="", description="Shared secret for /sync callers")

    # Parsing
    SOURCE_STYLE: SourceStyle = Field(
        default=SourceStyle.BANK_SMS,
        description="Message vocabulary of this deployment: bank_sms or wallet_notification",
    )
    PROFILE_PATH: str = Field(
        default="",
        description="Optional JSON file overriding the built-in keyword tables",
    )
    STORE_ORIGINAL_MESSAGE: bool = Field(
        default=True,
        description="Keep the raw notification text on each stored expense",
    )

    # Supabase (optional; in-memory storage when unset)
    SUPABASE_URL: str = Field(default="", description="Supabase project URL")
    SUPABASE_SERVICE_KEY: str = Field(default="", description="Supabase service-role key")
    EXPENSES_TABLE: str = Field(default="expenses", description="Table holding expenses")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Python log level")
    ENVIRONMENT: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # App
    APP_VERSION: str = Field(default="0.1.0", description="Application version")

    @property
    def log_level(self) -> str:
        return self.LOG_LEVEL

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def supabase_enabled(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_KEY)

    @property
    def secret_required(self) -> bool:
        """Outside development an empty API_SECRET rejects every caller."""
        return bool(self.API_SECRET) or self.ENVIRONMENT != "development"

    model_config = {"env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Factory for Settings; tests build their own instead."""
    return Settings()


settings = get_settings()
