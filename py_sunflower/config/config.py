from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings

import os

# Explicitly load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from SUNFLOWER_* environment variables."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="plain", description="Logging format (e.g., plain, json)")

    # Generation Configuration
    default_mode: str = Field(default="sunflower", description="Generation mode used when none is given")
    kdtree_threshold: int = Field(
        default=500, ge=2, description="Point count from which 'auto' statistics use a KD-tree"
    )

    # Viewer Configuration
    figure_size: float = Field(default=9.0, gt=0, description="Viewer window size in inches")
    figure_dpi: int = Field(default=100, gt=0, description="Viewer figure DPI")

    class Config:
        env_prefix = "SUNFLOWER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
