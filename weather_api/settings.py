from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized configuration.

    Loaded from:
    - environment variables
    - .env file (if present)

    The OpenWeatherMap key is optional: without it every endpoint answers
    with a scaffold response instead of calling the provider.
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Upstream provider
    openweathermap_api_key: str = ""
    openweathermap_base_url: str = "https://api.openweathermap.org"
    upstream_timeout_s: float = 10.0

    # When disabled, a missing key is a configuration error instead of a scaffold
    scaffold_fallback: bool = True

    # HTTP surface
    app_name: str = "Weather API"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


def get_settings() -> Settings:
    """
    Build settings from the current environment.

    Not cached: the API key is evaluated on every request so that adding
    or removing it takes effect without a restart.
    """
    return Settings()
