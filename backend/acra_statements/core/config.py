"""
config.py — Centralized Application Configuration Loader

Purpose:
- Define a single source of truth for validation, projection and ratio settings.
- Load and validate environment variables from `.env` or OS environment.

Settings:
- BALANCE_TOLERANCE_RATIO: allowed deviation of the accounting equation,
  as a fraction of total assets (0.001 = 0.1%).
- RATIO_DECIMAL_PLACES: rounding applied to every computed ratio.
- COGS_REVENUE_FRACTION: share of revenue used when cost of sales is estimated.
- INDUSTRY_KEYWORDS_FILE: optional JSON file overriding the classifier keywords.

This module does NOT:
- Read any statement data.
- Modify runtime settings after import.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py is at: backend/acra_statements/core/config.py
# .env should be at: backend/.env
_CONFIG_DIR = Path(__file__).parent
_BACKEND_DIR = _CONFIG_DIR.parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    _ENV_FILE_PATH = str(_ENV_FILE.resolve())
else:
    # pydantic will look in CWD
    _ENV_FILE_PATH = ".env"


class Settings(BaseSettings):
    """
    Settings container for the statement validator and framework projector.
    """
    LOG_LEVEL: str = Field(
        "INFO",
        description="Root logging level used by configure_logging()",
    )

    # Validation
    BALANCE_TOLERANCE_RATIO: float = Field(
        0.001,
        ge=0.0,
        description="Accounting equation tolerance as a fraction of |totalAssets|",
    )

    # Ratios
    RATIO_DECIMAL_PLACES: int = Field(
        4,
        ge=0,
        description="Decimal places every computed ratio is rounded to",
    )
    COGS_REVENUE_FRACTION: float = Field(
        0.6,
        gt=0.0,
        le=1.0,
        description="Fraction of revenue used to estimate cost of sales",
    )
    DAYS_IN_PERIOD: int = Field(
        365,
        gt=0,
        description="Days per reporting period for receivables/payables days",
    )

    # Classification
    INDUSTRY_KEYWORDS_FILE: str = Field(
        "",
        description="Optional JSON file with industry keyword lists (empty = built-in table)",
    )
    INDUSTRY_SHAPE_MATERIALITY_RATIO: float = Field(
        0.05,
        ge=0.0,
        le=1.0,
        description="Share of |totalAssets| a fair-value or investment-property balance needs to sway the shape pass",
    )

    # Projection
    DEFAULT_FRAMEWORK: str = Field(
        "sfrs-full",
        description="Framework id used by scripts when none is given",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        """Normalize log level names to upper case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Singleton: settings imported anywhere will reference same object.
settings = Settings()
