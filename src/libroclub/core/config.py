"""
Configuration module for LibroClub.

This module defines the Settings class, which loads environment variables
and provides application-wide configuration: the database URL, the running
environment, the log level and the default size of review rankings.

Usage:
    Import the `settings` object to access configuration throughout the project.
"""

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        DATABASE_URL (str): Database connection string.
        ENVIRONMENT (str): Current environment (e.g., 'production', 'development').
        LOG_LEVEL (str): Log level used by the scripts ('INFO', 'DEBUG', ...).
        DEFAULT_REVIEW_LIMIT (int): How many reviews top/bottom rankings return by default.
    """
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./libroclub.db")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DEFAULT_REVIEW_LIMIT: int = int(os.getenv("DEFAULT_REVIEW_LIMIT", "3"))

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
