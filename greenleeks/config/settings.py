"""
Run settings with Pydantic validation and environment variable support.
"""

from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Output format of the log sink."""

    TEXT = "text"
    JSON = "json"


class Settings(BaseSettings):
    """Options for a single run, read-only once built."""

    root_dir: Path = Field(
        default=Path("."),
        description="Directory to put under version control"
    )
    max_files: int = Field(
        default=100,
        ge=0,
        description="Maximum number of files allowed before committing"
    )
    gitconfig: str = Field(
        default="~/.gitconfig",
        description="Git configuration file holding the author identity"
    )
    log_format: LogFormat = Field(
        default=LogFormat.TEXT,
        description="Log format"
    )
    verbosity: int = Field(
        default=0,
        ge=0,
        description="Each step bumps the log level"
    )

    model_config = SettingsConfigDict(
        env_prefix="GREENLEEKS_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def from_cli(cls, **overrides) -> "Settings":
        """Build settings, letting explicitly passed CLI values win over the environment."""
        return cls(**{key: value for key, value in overrides.items() if value is not None})
