"""Configuration for logging."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from inputmask.core.exceptions import ConfigurationError

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

ENV_VARIABLES = {
    "level": "INPUTMASK_LOG_LEVEL",
    "format": "INPUTMASK_LOG_FORMAT",
    "output": "INPUTMASK_LOG_OUTPUT",
    "file_path": "INPUTMASK_LOG_FILE",
}


class LoggingConfig(BaseModel):
    """Configuration for structured logging."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format (json or text)")
    output: str = Field(default="stderr", description="Log output (stdout, stderr or file)")
    file_path: str | None = Field(default=None, description="Log file path")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LEVELS:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {sorted(VALID_LEVELS)}")
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in {"json", "text"}:
            raise ValueError(f"Invalid log format '{v}'. Use 'json' or 'text'")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: str) -> str:
        if v not in {"stdout", "stderr", "file"}:
            raise ValueError(f"Invalid log output '{v}'. Use 'stdout', 'stderr' or 'file'")
        return v

    @classmethod
    def from_file(cls, config_path: Path | str) -> LoggingConfig:
        """Load the ``logging`` section of a YAML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data.get("logging", {}))

    def with_env_overrides(self) -> LoggingConfig:
        """Return a copy with INPUTMASK_LOG_* environment variables applied.

        Raises:
            ConfigurationError: If an environment variable holds an invalid value
        """
        overrides: dict[str, Any] = {}
        for field_name, variable in ENV_VARIABLES.items():
            if value := os.getenv(variable):
                overrides[field_name] = value

        try:
            return type(self)(**{**self.model_dump(), **overrides})
        except ValidationError as e:
            error = e.errors()[0]
            field_name = str(error["loc"][0]) if error["loc"] else ""
            config_key = ENV_VARIABLES.get(field_name, field_name)
            raise ConfigurationError(
                f"Invalid value for {config_key}: {error['msg']}",
                config_key=config_key,
                recovery_suggestions=[f"Check the value of {config_key}"],
            ) from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


def load_logging_config(config_path: Path | str | None = None) -> LoggingConfig:
    """Load logging configuration from YAML (optional) and the environment."""
    config = LoggingConfig.from_file(config_path) if config_path else LoggingConfig()
    return config.with_env_overrides()
