"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Request body guard for record-heavy report requests
    max_records: int = 50_000


class PdfSettings(BaseSettings):
    """PDF rendering configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    default_company_name: str = "HQ Ledger"
    footer_text: str = "Thank you for your business!"
    margin: float = 12.0
    bottom_margin: float = 18.0
    body_font_size: int = 9
    row_line_height: float = 5.0

    # Core PDF fonts cannot encode the rupee sign
    ascii_currency: bool = True


class QrSettings(BaseSettings):
    """UPI QR code configuration."""

    model_config = SettingsConfigDict(env_prefix="QR_")

    box_size: int = 4
    border: int = 1
    error_correction: Literal["L", "M", "Q", "H"] = "M"
    fill_color: str = "#000000"
    back_color: str = "#FFFFFF"


class LogoSettings(BaseSettings):
    """Company logo loading configuration."""

    model_config = SettingsConfigDict(env_prefix="LOGO_")

    fetch_timeout: float = 5.0
    max_bytes: int = 2 * 1024 * 1024
    base_dir: Path = Path(".")
    allow_private_hosts: bool = False


class ReportSettings(BaseSettings):
    """Report aggregation and export configuration."""

    model_config = SettingsConfigDict(env_prefix="REPORT_")

    company_name: str = "HQ Ledger"
    generator_name: str = "HQ Ledger"
    # Upper (inclusive) day edges of the 1-30 / 31-60 / 61-90 buckets
    aging_edges: list[int] = [30, 60, 90]
    currency_number_format: str = '"Rs. "#,##0.00'
    tax_rate_tolerance: float = 0.5

    @field_validator("aging_edges")
    @classmethod
    def edges_ascending(cls, v: list[int]) -> list[int]:
        if len(v) != 3 or v[0] <= 0 or not v[0] < v[1] < v[2]:
            raise ValueError("aging_edges must be three strictly ascending positive day counts")
        return v


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "HQ Ledger"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    default_currency: str = "INR"

    # Sub-settings
    api: APISettings = Field(default_factory=APISettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)
    qr: QrSettings = Field(default_factory=QrSettings)
    logo: LogoSettings = Field(default_factory=LogoSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
