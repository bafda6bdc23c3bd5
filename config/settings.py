"""
config/settings.py

- Reads environment variables (and .env) into application-wide settings.
- pydantic v2 / pydantic-settings v2.
- The spreadsheet coordinates (SHEET_ID / API_KEY / SHEET_RANGE) are only read here;
  services receive them as explicit constructor arguments (see services/table_source.py).
"""

from typing import List, Optional, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # =========================
    # App / runtime
    # =========================
    ENV: Literal["dev", "stage", "prod"] = "dev"
    APP_TITLE: str = "Exam Results Portal API"
    APP_DESCRIPTION: str = "Student result lookup backed by a Google Sheets table"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # =========================
    # CORS
    # =========================
    # comma separated string -> List[str]
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            # "a,b , c" -> ["a","b","c"]
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # =========================
    # Results table source
    # =========================
    TABLE_SOURCE: Literal["sheets", "csv"] = "sheets"

    # Google Sheets (values API, read-only key auth)
    SHEET_ID: str = ""
    API_KEY: str = ""
    SHEET_RANGE: str = "cycle_test"
    SHEETS_API_BASE_URL: str = "https://sheets.googleapis.com/v4"
    SHEETS_TIMEOUT: Optional[float] = None  # None = wait indefinitely

    # Local snapshot (TABLE_SOURCE=csv)
    TABLE_CSV_PATH: str = "data/cycle_test.csv"

    # =========================
    # Logging
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# ✅ shared settings object
settings = Settings()
