from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


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
    app_name: str = "Shortener API"
    app_version: str = "0.1.0"
    api_prefix: str = "/u"
    static_dir: str = "dist"  # Served at "/" when the directory exists
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    
    # Database
    database_url: str = "sqlite:///./shortlink.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_pre_ping: bool = True
    db_echo: bool = False
    
    # Store backend
    store_backend: str = "sqlalchemy"  # Options: "sqlalchemy", "memory"
    
    # Short id generation
    short_id_length: int = 6
    id_generation_retries: int = 0  # Extra attempts after a duplicate id on insert
    reuse_existing_on_conflict: bool = True  # Return the winner's id when the same url races in
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None  # Also log to this file when set
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
