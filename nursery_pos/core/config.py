# nursery_pos/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./nursery.db"

    # Shop defaults
    DEFAULT_SHOP_NAME: str = "Agam Nursery"
    LEGACY_SHOP_NAME: str = "My Nursery Shop"

    # Receipts
    DEFAULT_COUNTRY_CODE: str = "91"
    CURRENCY_SYMBOL: str = "₹"
    PDF_CURRENCY_LABEL: str = "Rs."

    # Frontend
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    RATE_LIMIT_ENABLED: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )


settings = Settings()
