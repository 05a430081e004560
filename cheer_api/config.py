"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from cheer_api.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHEER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Configuration
    app_title: str = Field(default="Cheer API", description="Application title")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Bind address for python -m cheer_api")
    port: int = Field(default=8787, description="Bind port for python -m cheer_api")
    user_agent: str = Field(default="CheerAPI/1.0", description="Outbound User-Agent header")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=True, description="Use JSON log format")
    log_file: str | None = Field(default=None, description="Optional log file path")

    # Query defaults
    default_verse_ref: str = Field(default="Psalm 34:18", description="Verse used when ref is omitted")
    default_song_query: str = Field(default="gospel worship", description="Topic used when q is omitted")
    default_joke_type: str = Field(default="dad", description="Joke type used when type is omitted")

    # Upstream providers
    advice_url: str = Field(default="https://api.adviceslip.com/advice")
    quotable_url: str = Field(default="https://api.quotable.io/random")
    quote_list_url: str = Field(default="https://type.fit/api/quotes")
    verse_url: str = Field(default="https://labs.bible.org/api/")
    song_url: str = Field(default="https://itunes.apple.com/search")
    dad_joke_url: str = Field(default="https://icanhazdadjoke.com/")
    funny_joke_url: str = Field(default="https://official-joke-api.appspot.com/jokes/random")
    nerdy_joke_url: str = Field(default="https://v2.jokeapi.dev/joke/Programming")
    hr_joke_url: str = Field(default="https://v2.jokeapi.dev/joke/Miscellaneous")
    riddle_url: str = Field(default="https://riddles-api.vercel.app/random")

    # Per-provider timeouts in seconds
    advice_timeout: float = Field(default=2.5, gt=0, le=10)
    quotable_timeout: float = Field(default=3.0, gt=0, le=10)
    quote_list_timeout: float = Field(default=4.0, gt=0, le=10)
    verse_timeout: float = Field(default=3.5, gt=0, le=10)
    song_timeout: float = Field(default=3.5, gt=0, le=10)
    dad_joke_timeout: float = Field(default=2.5, gt=0, le=10)
    funny_joke_timeout: float = Field(default=3.0, gt=0, le=10)
    nerdy_joke_timeout: float = Field(default=3.0, gt=0, le=10)
    hr_joke_timeout: float = Field(default=3.0, gt=0, le=10)
    riddle_timeout: float = Field(default=3.0, gt=0, le=10)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid CHEER_* settings: {e}") from e
