"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REGIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Region Generation Configuration
    default_seed: float = Field(default=0.123456789, description="Seed used when none is given")
    max_generation_steps: int = Field(
        default=10000, description="Step ceiling after which generation is considered runaway"
    )
    default_region_count: int = Field(default=5, description="Default number of regions")
    default_min_region_size: int = Field(default=10, description="Default minimum region size")

    # Map Configuration
    default_width: float = Field(default=800, description="Default canvas width")
    default_height: float = Field(default=600, description="Default canvas height")
    default_num_points: int = Field(default=200, description="Default number of cells")
    default_relaxation_iterations: int = Field(
        default=2, description="Default number of Lloyd relaxation iterations"
    )


# Instantiate singleton settings object
settings = Settings()
