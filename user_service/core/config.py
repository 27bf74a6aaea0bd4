# Standard library imports
import os
from typing import Final, List, Optional


_DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000,http://localhost:8081"


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "random_users")
        
        # Random user API Configuration
        self.random_user_api_url: Final[str] = os.getenv(
            "RANDOM_USER_API_URL",
            "https://randomuser.me/api/"
        )
        self.random_user_api_timeout: Final[float] = float(
            os.getenv("RANDOM_USER_API_TIMEOUT", "10")
        )
        
        # HTTP Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))
        self.api_prefix: Final[str] = os.getenv("API_PREFIX", "").rstrip("/")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS).split(",")
            if origin.strip()
        ]
        
        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
