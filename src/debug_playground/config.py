"""Application configuration using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Program settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DEBUG_PLAYGROUND_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # Main loop
    iterations: int = Field(default=10, ge=1, le=1000)
    highlight_after: int = Field(default=5, ge=0)  # conditional branch fires when i > this

    # Random threshold check
    random_upper_bound: int = Field(default=100, ge=1)
    random_threshold: int = Field(default=50, ge=0)
    random_seed: int | None = None

    # Pause between iterations so a debugger can keep up
    step_delay_seconds: float = Field(default=0.1, ge=0.0, le=10.0)


# Global settings instance
settings = Settings()
