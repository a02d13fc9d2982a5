"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False  # Log raw form inputs when true
    log_level: str = "INFO"
    default_frequency: str = "monthly"  # Frequency restored on form reset
    currency_symbol: str = "$"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
