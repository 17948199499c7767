"""
Configuration Management for Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The engine has no external services, so the only knobs are logging,
display currency and the thresholds used for non-blocking warnings.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from EXPENSE_TRACKER_* environment variables
    and an optional .env file.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG log level)"
    )
    
    # Logging
    log_level: str = Field(
        default="INFO",
        description="Standard library log level name"
    )
    log_format: str = Field(
        default="json",
        pattern="^(json|console)$",
        description="Log renderer: json or console"
    )
    
    # Display
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Currency symbol used in insight text"
    )
    
    # Validation thresholds (warnings only, never block)
    max_expense_amount: float = Field(
        default=100000.0,
        gt=0,
        description="Amounts above this are flagged as suspicious"
    )
    future_date_tolerance_days: int = Field(
        default=0,
        ge=0,
        description="How many days in the future an expense date can be"
    )
    
    # Audit
    audit_history_size: int = Field(
        default=500,
        ge=1,
        le=100000,
        description="Number of audit events kept in memory"
    )
    
    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level
    
    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.
    
    Aggregates all sub-settings for easy access.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).
    
    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
