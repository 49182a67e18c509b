from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TRANSITLAND_BASE_URL = "https://transit.land/api/v2/rest"
DEFAULT_PAGE_LIMIT = 20
DEFAULT_TIMEOUT_SECONDS = 30.0


class TransitlandConfig(BaseSettings):
    """Configuration for Transitland REST API access.

    Automatically loads from environment variables and .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_key: str | None = Field(default=None, alias="TRANSITLAND_API_KEY")
    base_url: str = Field(default=TRANSITLAND_BASE_URL, alias="TRANSITLAND_BASE_URL")
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, alias="TRANSITLAND_TIMEOUT")
    page_limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, alias="TRANSITLAND_PAGE_LIMIT")


@lru_cache
def get_config() -> TransitlandConfig:
    """Get Transitland configuration (cached singleton).

    Returns:
        TransitlandConfig with values from .env file or environment variables.
    """
    return TransitlandConfig()
