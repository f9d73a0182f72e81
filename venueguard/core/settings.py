from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: str = "*"  # Comma-separated list of origins

    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment name
    ENVIRONMENT: str = "development"

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    class Config:
        case_sensitive = True  # Variables are case-sensitive
        env_file = ".env"      # Load environment variables from .env file
        env_file_encoding = "utf-8" # Encoding for the .env file


@lru_cache() # Cache the settings object for performance
def get_settings() -> Settings:
    return Settings()
