"""Configuration loading and management for resultkit.

Functions:
    load_config: Load configuration from ~/.resultkit/config.yaml
    create_default_config: Write a default config.yaml
    config_exists: Check whether config.yaml exists
    configure_logging_from_file: Apply the logging section of a config file
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError
import yaml

from resultkit.config.models import (
    ResultKitConfig,
    get_config_dir,
    get_default_config,
)
from resultkit.core.errors import ConfigError
from resultkit.observability.logging import configure_logging

CONFIG_FILE_NAME = "config.yaml"


def _default_config_path() -> Path:
    return get_config_dir() / CONFIG_FILE_NAME


def _model_to_yaml_dict(model: ResultKitConfig) -> dict[str, Any]:
    """Convert a Pydantic model to a YAML-serializable dict."""
    return model.model_dump(mode="json")


def create_default_config(
    config_dir: Path | None = None,
    *,
    overwrite: bool = False,
) -> Path:
    """Create the default configuration file.

    Args:
        config_dir: Directory to create config.yaml in. Defaults to ~/.resultkit/
        overwrite: If True, overwrite an existing file. Defaults to False.

    Returns:
        Path to the written config.yaml.

    Raises:
        ConfigError: If the file exists and overwrite=False.
    """
    if config_dir is None:
        config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    config_path = config_dir / CONFIG_FILE_NAME
    if config_path.exists() and not overwrite:
        raise ConfigError(
            f"Configuration file already exists: {config_path}",
            config_file=str(config_path),
        )

    with config_path.open("w", encoding="utf-8") as f:
        yaml.dump(
            _model_to_yaml_dict(get_default_config()),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    return config_path


def load_config(config_path: Path | None = None) -> ResultKitConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to config file. Defaults to ~/.resultkit/config.yaml.

    Returns:
        Validated ResultKitConfig instance. An empty file yields defaults.

    Raises:
        ConfigError: If file doesn't exist, is malformed, or fails validation.
    """
    if config_path is None:
        config_path = _default_config_path()

    if not config_path.exists():
        raise ConfigError(
            f"Configuration file not found: {config_path}",
            config_file=str(config_path),
        )

    try:
        with config_path.open(encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse configuration file: {e}",
            config_file=str(config_path),
            details={"yaml_error": str(e)},
        ) from e

    if config_dict is None:
        config_dict = {}

    try:
        return ResultKitConfig.model_validate(config_dict)
    except PydanticValidationError as e:
        error_messages = []
        locations = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            locations.append(loc)
            error_messages.append(f"  - {loc}: {error['msg']}")

        raise ConfigError(
            "Configuration validation failed:\n" + "\n".join(error_messages),
            config_key=locations[0] if locations else None,
            config_file=str(config_path),
            details={"validation_errors": e.errors()},
        ) from e


def config_exists(config_path: Path | None = None) -> bool:
    """Check if the configuration file exists."""
    if config_path is None:
        config_path = _default_config_path()
    return config_path.exists()


def configure_logging_from_file(config_path: Path | None = None) -> ResultKitConfig:
    """Load a config file and apply its logging section.

    Args:
        config_path: Path to config file. Defaults to ~/.resultkit/config.yaml.

    Returns:
        The loaded configuration.

    Raises:
        ConfigError: If the file cannot be loaded.
    """
    config = load_config(config_path)
    configure_logging(config.logging)
    return config
