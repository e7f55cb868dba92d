"""
API Configuration

All secrets loaded from environment variables.
NEVER hardcode API keys or spreadsheet credentials.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App info
    app_name: str = "barprep API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Google Sheets (recipes + booked events)
    sheets_spreadsheet_id: Optional[str] = None  # Loaded from SHEETS_SPREADSHEET_ID env var
    sheets_api_key: Optional[str] = None  # Loaded from SHEETS_API_KEY env var
    sheets_recipes_tab: str = "Recipes"
    sheets_events_tab: str = "Active_Events"
    sheets_timeout_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def sheets_enabled(self) -> bool:
        return bool(self.sheets_spreadsheet_id and self.sheets_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
