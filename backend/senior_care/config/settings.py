"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[2] / "public"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",  # Ignore extra fields from .env files
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # Load .env first, then .env.local (so .env.local overrides)
    )

    # Application settings
    app_name: str = "Senior Care Assistant"
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "app_env", "node_env"),
    )
    host: str = "0.0.0.0"
    port: int = 3000

    # Anthropic settings
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_max_tokens: int = 300
    anthropic_temperature: float = 0.7
    anthropic_timeout_seconds: float = 30.0
    probe_max_tokens: int = 50

    # CORS settings
    frontend_url: Optional[str] = None
    cors_origin_regex: str = r"https://.*\.ondigitalocean\.app"

    # Gateway limits
    rate_limit_max_requests: int = 100
    rate_limit_window_seconds: float = 15 * 60
    rate_limit_message: str = "Too many requests from this IP, please try again later."
    max_body_bytes: int = 10 * 1024 * 1024
    trust_proxy_headers: bool = False

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True
    # Raw user messages and model replies are only logged when this is on
    log_conversations: bool = False

    static_dir: Path = DEFAULT_STATIC_DIR

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "development"

    @property
    def allowed_origins(self) -> List[str]:
        if self.is_production:
            return [self.frontend_url] if self.frontend_url else []
        return [f"http://localhost:{self.port}", f"http://127.0.0.1:{self.port}"]

    @property
    def allowed_origin_regex(self) -> Optional[str]:
        return self.cors_origin_regex if self.is_production else None


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
