"""Application configuration."""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = Field(default="Idea Leaderboard API", description="Service display name")

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address for the HTTP server")
    port: int = Field(default=3000, description="Bind port for the HTTP server")

    # CORS
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # Leaderboard
    leaderboard_limit: int = Field(
        default=5,
        description="Number of ideas returned by the leaderboard when no limit is given"
    )
    leaderboard_max_limit: int = Field(
        default=100,
        description="Largest limit a client may request from the leaderboard"
    )

    # Rating
    rating_seed: int | None = Field(
        default=None,
        description="Seed for the rating generator (None draws from system entropy)"
    )

    # Development Settings
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is a usable TCP port."""
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("leaderboard_limit", "leaderboard_max_limit")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """Validate integer is positive."""
        if v <= 0:
            raise ValueError(f"Value must be positive, got {v}")
        return v

    @model_validator(mode="after")
    def validate_leaderboard_limits(self) -> "Settings":
        """Validate the default leaderboard size fits under the maximum."""
        if self.leaderboard_limit > self.leaderboard_max_limit:
            raise ValueError(
                "leaderboard_limit must be less than or equal to leaderboard_max_limit"
            )
        return self


# Global settings instance
settings = Settings()
