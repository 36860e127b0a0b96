from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "Short Link API"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    
    # Database
    database_url: str = "sqlite:///./shortlink.db"
    
    # Link store backend
    storage_backend: str = "sqlalchemy"  # Options: "sqlalchemy", "memory"
    
    # Short path generation
    short_code_strategy: str = "random"  # Options: "random", "base62"
    short_url_length: int = 6
    max_retries: int = 5
    short_code_salt: int = 1256  # Salt for Base62 strategy
    custom_path_max_length: int = 64
    
    # Absolute result URLs are built as "<scheme>://<request host>/<path>"
    result_url_scheme: str = "http"
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
