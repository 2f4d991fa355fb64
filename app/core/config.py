"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_KEY = "default-secret-key"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for the catalog routes.
        api_key: Shared secret expected in the x-api-key header.
            Falls back to a well-known default; set API_KEY in production.
        default_page: Page used when a listing has no valid page.
        default_limit: Page size used when a listing has no valid limit.
        rate_limit_write: Rate limit for create/update/delete endpoints.
        host: Bind address when served with ``python -m app.main``.
        port: Bind port when served with ``python -m app.main``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Product Catalog API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    api_key: str = DEFAULT_API_KEY
    default_page: int = 1
    default_limit: int = 10
    rate_limit_write: str = "60/minute"
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def uses_default_api_key(self) -> bool:
        """True when no API key was configured and the insecure default applies."""
        return self.api_key == DEFAULT_API_KEY


settings = Settings()
