"""
Configuration settings for coordparse.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        default_target_epsg: Projection parsed coordinates are returned in
        default_decimals: Rounding applied to parsed coordinates
        mgrs_min_precision: Shortest accepted MGRS token, spaces removed
        log_level: Root log level used by setup_logging
        json_logs: Emit JSON log lines instead of plain text
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="COORDPARSE_",
    )

    # Parser settings
    default_target_epsg: str = "EPSG:3857"
    default_decimals: int = Field(default=1, ge=0, le=12)
    # Grid zone + 100km square + one digit per axis (10km precision)
    mgrs_min_precision: int = Field(default=7, ge=5)

    # Logging settings
    log_level: str = "INFO"
    json_logs: bool = False

    # API settings
    api_v1_prefix: str = "/api/v1"
    port: int = 8000

    # CORS settings
    cors_origins: str = "http://localhost:5173,http://localhost:3000,http://localhost:4173"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


# Global settings instance
settings = Settings()
