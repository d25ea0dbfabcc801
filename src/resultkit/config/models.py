"""Pydantic models for resultkit configuration.

Classes:
    ResultKitConfig: Top-level configuration loaded from config.yaml
"""

from pathlib import Path

from pydantic import BaseModel, Field

from resultkit.observability.logging import LoggingConfig


class ResultKitConfig(BaseModel, frozen=True):
    """Top-level resultkit configuration.

    Validates against config.yaml in ~/.resultkit/.

    Attributes:
        logging: Structured logging configuration
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_config() -> ResultKitConfig:
    """Get the default configuration with every field populated."""
    return ResultKitConfig()


def get_config_dir() -> Path:
    """Get the resultkit configuration directory path (~/.resultkit/)."""
    return Path.home() / ".resultkit"
