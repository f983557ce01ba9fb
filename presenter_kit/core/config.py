"""
Configuration management for presenter_kit.
Follows onion architecture - core configuration layer.
"""

from typing import Literal
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from the environment or a .env file."""

    # Escaping Configuration
    apostrophe_entity: Literal["&apos;", "&#x27;"] = "&apos;"

    # Presenter Configuration
    allow_missing_subject: bool = False  # Defer a missing subject to the first forwarded access

    # Logging Configuration
    log_dir: str = "logs"
    log_file: str = "presenter.log"
    log_level: str = "INFO"
    log_max_bytes: int = 10 * 1024 * 1024  # 10MB
    log_backup_count: int = 5

    class Config:
        """Pydantic settings configuration."""
        env_prefix = "PRESENTER_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env


# Global settings instance
settings = Settings()
