"""Configuration management for tabstats.

Uses pydantic-settings for type-safe environment variable loading. Every field
can be overridden with a ``TABSTATS_`` prefixed variable, e.g.
``TABSTATS_GROUP_COLUMN=Outcome``.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TABSTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    api_host: str = Field(
        default="127.0.0.1",
        description="API server host",
    )
    api_port: int = Field(
        default=8000,
        description="API server port",
    )

    # Analysis Settings
    group_column: str = Field(
        default="Survived",
        description="Label column used to cross-tabulate categorical counts",
    )
    source_field: str = Field(
        default="Source",
        description="Field added to merged rows to record their source",
    )
    missing_label: str = Field(
        default="Missing",
        description="Category key used for null or absent values",
    )
    count_chart_columns: list[str] = Field(
        default=["Sex", "Pclass", "Embarked"],
        description="Columns charted as flat value counts after loading",
    )
    histogram_columns: list[str] = Field(
        default=["Age", "Fare"],
        description="Numeric columns binned into histograms after loading",
    )
    preview_rows: Literal["5", "10", "20", "head", "tail", "all"] = Field(
        default="5",
        description="Default preview mode",
    )

    # Export Settings
    csv_export_name: str = Field(
        default="merged.csv",
        description="Default file name for the exported row set",
    )
    summary_export_name: str = Field(
        default="summary.json",
        description="Default file name for the exported summary",
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
