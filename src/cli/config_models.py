"""Pydantic configuration models for Moodify."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def default_data_dir() -> Path:
    return Path(os.environ.get("MOODIFY_HOME", "~/moodify"))


class PathsConfig(BaseModel):
    """File paths configuration."""

    data_dir: Path = Field(default_factory=default_data_dir)
    db_file: Optional[Path] = None  # None = <data_dir>/moodify.db
    log_file: Optional[Path] = None

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ and resolve db_file relative to data_dir."""
        self.data_dir = self.data_dir.expanduser()
        if self.db_file is None:
            self.db_file = self.data_dir / "moodify.db"
        elif not self.db_file.expanduser().is_absolute():
            self.db_file = self.data_dir / self.db_file
        self.db_file = self.db_file.expanduser()
        if self.log_file is not None:
            self.log_file = self.log_file.expanduser()
        return self


class SentimentConfig(BaseModel):
    """Sentiment analysis configuration."""

    latency_seconds: float = 0.0
    seed: Optional[int] = None  # fixed seed = reproducible confidence scores

    @field_validator("latency_seconds")
    @classmethod
    def validate_latency(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"latency_seconds must be >= 0, got {v}")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file_level: str = "DEBUG"
    json_mode: bool = False

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class WebConfig(BaseModel):
    """API server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    frontend_origin: str = "http://localhost:3000"


class MoodifyConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    @model_validator(mode="after")
    def apply_env_overrides(self):
        """FRONTEND_ORIGIN env var wins over the config file."""
        origin = os.getenv("FRONTEND_ORIGIN")
        if origin:
            self.web.frontend_origin = origin
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "MoodifyConfig":
        """Create config from dict, coercing string paths."""
        if "paths" in data and isinstance(data["paths"], dict):
            for key in ["data_dir", "db_file", "log_file"]:
                if isinstance(data["paths"].get(key), str):
                    data["paths"][key] = Path(data["paths"][key])
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
