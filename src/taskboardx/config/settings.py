"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    storage_dir: Path = Field(
        default_factory=lambda: Path.home() / ".taskboardx",
        description="Directory holding the stored collections",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    host: str = Field(default="127.0.0.1", description="Bind address for the JSON API")

    port: int = Field(default=3000, description="Port for the JSON API")

    model_config = {
        "env_prefix": "TASKBOARDX_",
    }
