"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class BankAccountConfig(BaseSettings):
    """Bank account configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BANK_ACCOUNT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stdout

    # Business rules configuration
    check_withdraw_currency: bool = False  # Off: withdrawals skip the currency check

    # Display configuration
    display_logger_name: str = "bank_account.accounts"


# Global configuration instance
config = BankAccountConfig()


def get_config() -> BankAccountConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankAccountConfig:
    """Reload configuration from environment"""
    global config
    config = BankAccountConfig()
    return config
