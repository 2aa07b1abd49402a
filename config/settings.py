"""
Fuzzy Match Tool - Configuration

Loads settings from environment variables with sensible defaults.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    @property
    def project_root(self) -> Path:
        """Return project root directory."""
        return PROJECT_ROOT

    # Application
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="")

    # Matching settings
    LIST_SEPARATOR: str = Field(default="|")
    SCORING_WORKERS: int = Field(default=1)  # -1 uses all cores

    @field_validator("SCORING_WORKERS")
    @classmethod
    def check_scoring_workers(cls, value: int) -> int:
        if value == 0 or value < -1:
            raise ValueError("SCORING_WORKERS must be -1 (all cores) or a positive integer")
        return value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
