"""Configuration module for resultkit.

Configuration is stored in ~/.resultkit/config.yaml.

Usage:
    from resultkit.config import configure_logging_from_file, load_config

    config = load_config()
    level = config.logging.log_level

    # Or apply the logging section directly
    configure_logging_from_file()
"""

from resultkit.config.loader import (
    config_exists,
    configure_logging_from_file,
    create_default_config,
    load_config,
)
from resultkit.config.models import (
    ResultKitConfig,
    get_config_dir,
    get_default_config,
)

__all__ = [
    "ResultKitConfig",
    "load_config",
    "create_default_config",
    "config_exists",
    "configure_logging_from_file",
    "get_config_dir",
    "get_default_config",
]
