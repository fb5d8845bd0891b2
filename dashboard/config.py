from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Firebase
    firebase_project_id: Optional[str] = None
    firebase_credentials_path: Optional[str] = None

    # Application
    app_env: str = "local"
    log_level: str = "DEBUG"

    # Document store
    document_backend: Literal["firestore", "json"] = "json"
    data_dir: str = "sample_data"
    orders_collection: str = "orders"
    stores_collection: str = "stores"
    restaurants_collection: str = "restaurants"

    # Display settings
    timestamp_format: str = "%m/%d/%Y, %I:%M:%S %p"
    currency_symbol: str = "$"

    # Receipt settings
    receipt_brand: str = "GoBuyMe"
    receipt_title: str = "SALES RECEIPT"
    receipt_thank_you: str = "Thank you for your order!"
    receipt_footer: str = "GoBuyMe Marketplace"
    receipt_default_actor: str = "Admin"
    receipt_date_format: str = "%m/%d/%Y"
    receipt_time_format: str = "%I:%M:%S %p"

    # Seed data settings
    default_seed_orders: int = 40
    default_seed_value: int = 42

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
