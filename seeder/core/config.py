"""
Seeder settings and configuration management.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Seeder settings."""
    # Base
    PROJECT_NAME: str = "Gofreta Seeder"
    VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "gofreta"
    DATABASE_TIMEOUT_MS: int = 5000  # server selection timeout

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        raise ValueError(v)

    class Config:
        """Pydantic config."""
        case_sensitive = True
        env_file = ".env"


# Create singleton settings instance
settings = Settings()
