from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables with hardcoded defaults"""

    # Registry document - a single JSON array holding every business record
    DATA_FILE: str = "data/businesses.json"

    # Write the example businesses on first start when no document exists
    SEED_ON_START: bool = True

    # Legacy behaviour: an unreadable document is treated as an empty registry
    # instead of failing the request with a storage error
    STORE_READ_FAILURE_AS_EMPTY: bool = False

    # Query defaults
    DEFAULT_PAGE_SIZE: int = 10

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    API_VERSION: str = "1.0.0"

    # CORS - the dashboard dev servers
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173"

    # Environment - Hardcoded default
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def data_path(self) -> Path:
        """Registry document path; relative paths resolve against the working directory"""
        return Path(self.DATA_FILE).expanduser().resolve()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
