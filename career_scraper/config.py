"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WikipediaSettings(BaseSettings):
    """Wikipedia fetch configuration."""

    base_url: str = Field(default="https://en.wikipedia.org", alias="WIKIPEDIA_BASE_URL")
    api_url: str = Field(default="https://en.wikipedia.org/w/api.php", alias="WIKIPEDIA_API_URL")
    user_agent: str = Field(
        default="CareerScraper/1.0 (football career history extraction)",
        alias="WIKIPEDIA_USER_AGENT"
    )

    # One request per second to stay within the provider's etiquette
    rate_limit_seconds: float = Field(default=1.0, ge=0.0, alias="WIKIPEDIA_RATE_LIMIT_SECONDS")
    request_timeout: int = Field(default=30, gt=0, alias="WIKIPEDIA_REQUEST_TIMEOUT")
    max_retries: int = Field(default=3, ge=1, alias="WIKIPEDIA_MAX_RETRIES")

    # Appended to the player name when searching for the article
    search_suffix: str = Field(default=" footballer", alias="WIKIPEDIA_SEARCH_SUFFIX")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class MatchingSettings(BaseSettings):
    """Team name resolution configuration."""

    threshold: float = Field(default=0.75, ge=0.0, le=1.0, alias="TEAM_MATCH_THRESHOLD")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class StorageSettings(BaseSettings):
    """Data storage configuration."""

    data_dir: str = Field(default="data/careers", alias="DATA_DIR")
    logs_dir: str = Field(default="logs", alias="LOGS_DIR")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Settings(BaseSettings):
    """Master settings aggregator."""

    wikipedia: WikipediaSettings = Field(default_factory=WikipediaSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Global settings instance
settings = Settings()
