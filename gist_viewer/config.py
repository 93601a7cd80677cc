"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="GIST_VIEWER_")

    app_name: str = "Gist Viewer"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    # GitHub API settings
    github_api_base_url: str = "https://api.github.com"
    github_api_timeout: float = 10.0

    # Whose gists are shown
    username: str = Field(default="octocat", min_length=1)
    repo_name: str = "gist-viewer"

    # Only gists updated at or after this UTC timestamp are requested
    since_threshold: str = "2022-01-01T00:00:00Z"
    page_limit: int = Field(default=100, ge=1, le=100)


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
