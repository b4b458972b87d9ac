"""Configuration management for the news clustering engine."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    # ── Clustering ─────────────────────────────────────────────────────────
    similarity_threshold: float = Field(
        0.4, description="Minimum combined similarity to merge two articles"
    )
    time_window_hours: float = Field(
        48, description="Maximum publish-time gap between clustered articles"
    )

    # ── Processing Settings ────────────────────────────────────────────────
    deduplicate: bool = Field(True, description="Run title deduplication before clustering")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = Field("INFO", description="Log level")
    json_logging: bool = Field(False, description="Enable JSON logging")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("similarity_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        """Validate similarity threshold."""
        if not 0 <= v <= 1:
            raise ValueError("Similarity threshold must be between 0 and 1")
        return v

    @field_validator("time_window_hours")
    @classmethod
    def validate_window(cls, v: float) -> float:
        """Validate time window."""
        if v <= 0:
            raise ValueError("Time window must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def validate_config(settings: Settings) -> bool:
    """Validate configuration completeness."""
    try:
        # Re-run field validation on the current values
        Settings.model_validate(settings.model_dump())
        return True

    except ValueError as e:
        print(f"Configuration validation failed: {e}")
        return False


if __name__ == "__main__":
    if validate_config(get_settings()):
        print("✅ Configuration is valid")
    else:
        print("❌ Configuration validation failed")
        exit(1)
