"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from deployer.core.exceptions import ConfigurationError

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: Literal["development", "staging", "production"] = "development"
    app_debug: bool = True

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("api_port", "port"),
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Render
    render_api_key: str = Field(default="")
    render_api_url: str = "https://api.render.com/v1/services"
    render_dashboard_url: str = "https://dashboard.render.com/web/{service_id}"
    render_plan: str = "starter"
    render_owner_id: str | None = None

    # GitHub
    github_api_url: str = "https://api.github.com"
    github_raw_url: str = "https://raw.githubusercontent.com"
    github_web_prefix: str = "https://github.com/"

    # Outbound HTTP timeout in seconds
    http_timeout: float = 10.0

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"
    log_file: str | None = None

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    def require_render_api_key(self) -> str:
        """Return the Render API key or raise if it is not configured."""
        if not self.render_api_key:
            raise ConfigurationError(
                "RENDER_API_KEY is not set",
                {"setting": "render_api_key"},
            )
        return self.render_api_key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
