from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for toshoprovider."""

    model_config = SettingsConfigDict(env_prefix="TOSHO_", case_sensitive=False)

    # Feed
    api_url: str = Field(
        default="https://feed.animetosho.org/json",
        description="AnimeTosho JSON feed endpoint",
    )
    request_timeout_seconds: float = Field(
        default=30.0, description="Timeout for a single feed request in seconds"
    )
    user_agent: str = Field(
        default="toshoprovider/1.0 Feed Client",
        description="User-Agent header sent to the feed",
    )

    # Counter correction
    counter_threshold: int = Field(
        default=30_000,
        description="Seeder/leecher counts above this value are reset to zero",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


settings = Settings()
