"""Centralized configuration management using Pydantic Settings."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Instances are immutable and are handed explicitly to every component
    that needs them.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHINDEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_env: Environment = Field(default=Environment.DEVELOPMENT, description="Environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_to_file: bool = Field(default=False, description="Write log files besides stderr")
    logs_dir_path: str = Field(default="./logs", description="Directory for log files")

    # Site
    base_url: str = Field(default="https://shinden.pl", description="Site root URL")
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/73.0.3683.75 Safari/537.36"
        ),
        description="User-Agent header sent with every request",
    )
    accept_language: str = Field(
        default="pl-PL,pl;q=0.9,en-US;q=0.8,en;q=0.7", description="Accept-Language header"
    )

    # HTTP
    request_timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")

    # Mapping
    page_size: int = Field(default=10, ge=1, description="Items per listing page on the site")
    html_parser: Literal["lxml", "html.parser"] = Field(
        default="lxml", description="BeautifulSoup tree builder"
    )
    date_format: str = Field(default="%Y-%m-%d", description="Date format of scraped dates")
    date_time_format: str = Field(
        default="%Y-%m-%d %H:%M:%S", description="Date-time format of scraped timestamps"
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store the site URL without a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == Environment.PRODUCTION

    @property
    def logs_dir(self) -> Path:
        """Get logs directory path."""
        path = Path(self.logs_dir_path)
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache
def get_settings() -> Settings:
    """Get cached default settings instance."""
    return Settings()
