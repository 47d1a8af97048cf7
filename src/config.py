"""Application configuration"""

import os
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""
    
    # Application
    APP_NAME: str = "TaxPositionLedger"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    
    # API
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    ACCESS_LOG: bool = os.getenv("ACCESS_LOG", "True").lower() == "true"
    
    # Wire format for the computed position: "number" or "string"
    DECIMAL_WIRE_FORMAT: str = os.getenv("DECIMAL_WIRE_FORMAT", "number")
    
    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./tax_ledger.db")
    
    # Storage reads
    CONCURRENT_READS: bool = os.getenv("CONCURRENT_READS", "True").lower() == "true"
    STORAGE_READ_RETRIES: int = int(os.getenv("STORAGE_READ_RETRIES", "2"))
    STORAGE_RETRY_INITIAL_DELAY: float = float(os.getenv("STORAGE_RETRY_INITIAL_DELAY", "0.1"))
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
    
    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
