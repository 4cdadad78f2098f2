"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Out of Hours Job Tracker"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # Calendar used by the shift report ("jobs logged today")
    TIMEZONE: str = "Europe/London"

    # SLA defaults applied when the job log form leaves them blank
    DEFAULT_ACCEPT_SLA_MINUTES: int = 30
    DEFAULT_ONSITE_SLA_MINUTES: int = 90
    DEFAULT_COMPLETED_SLA_MINUTES: int = 180
    DEFAULT_TARGET_COMPLETION_MINUTES: int = 240

    # Job numbering
    JOB_NUMBER_PREFIX: str = "OOH"

    # Development
    SEED_DEMO_DATA: bool = False
    ENABLE_METRICS: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, list):
            return v
        return ["*"]

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator(
        "DEFAULT_ACCEPT_SLA_MINUTES",
        "DEFAULT_ONSITE_SLA_MINUTES",
        "DEFAULT_COMPLETED_SLA_MINUTES",
        "DEFAULT_TARGET_COMPLETION_MINUTES",
    )
    @classmethod
    def validate_positive_minutes(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("SLA minutes must be positive")
        return v

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
