"""
API configuration settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """API settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Game tables (None = packaged tables)
    TABLES_DIR: Optional[str] = None

    # Hatch audit
    DEFAULT_AUDIT_SAMPLES: int = 10000
    MAX_AUDIT_SAMPLES: int = 100000

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
