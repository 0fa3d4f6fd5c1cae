"""
Configuration loading for the Crocodoc client.

Settings live in a YAML file (``crocodoc.yaml``) in the platformdirs user
config directory. The API token can also be supplied through the
``CROCODOC_API_TOKEN`` environment variable, which takes precedence.
"""

import os
from typing import Any, Dict, Optional

import platformdirs
import yaml

from crocodoc.constants import (
    API_TOKEN_ENV_VAR,
    APP_NAME,
    CONFIG_FILE_NAME,
    CROCODOC_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT,
)
from crocodoc.exceptions import ConfigFileError, ConfigurationError
from crocodoc.log_utils import logger


def get_config_file_path() -> str:
    """
    Return the default configuration file path.

    Returns:
        str: ``crocodoc.yaml`` inside the platformdirs user config directory.
    """
    return os.path.join(platformdirs.user_config_dir(APP_NAME), CONFIG_FILE_NAME)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the client configuration and apply environment overrides.

    A missing file is not an error: the returned mapping then only holds what
    the environment provides. An empty file loads as an empty mapping.

    Parameters:
        config_path (Optional[str]): Explicit path to a YAML file. Defaults to
            the platformdirs-managed location.

    Returns:
        Dict[str, Any]: The configuration mapping.

    Raises:
        ConfigFileError: If the file cannot be read, is not valid YAML, or
            does not contain a mapping.
    """
    path = config_path or get_config_file_path()
    config: Dict[str, Any] = {}

    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigFileError(
                "Failed to load configuration", path=path, details=str(e)
            ) from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigFileError(
                "Configuration file must contain a mapping",
                path=path,
                details=f"got {type(loaded).__name__}",
            )
        config.update(loaded)
        logger.debug(f"Loaded configuration from {path}")
    elif config_path:
        # An explicit path that does not exist is worth telling the user about
        logger.warning(f"Configuration file not found: {path}")

    env_token = os.environ.get(API_TOKEN_ENV_VAR)
    if env_token:
        config["API_TOKEN"] = env_token

    return config


def get_api_token(config: Dict[str, Any]) -> str:
    """
    Return the API token from a loaded configuration.

    Raises:
        ConfigurationError: If no non-blank token is configured.
    """
    token = config.get("API_TOKEN")
    if not isinstance(token, str) or not token.strip():
        raise ConfigurationError(
            "No Crocodoc API token configured",
            details=f"Set API_TOKEN in {CONFIG_FILE_NAME} or the {API_TOKEN_ENV_VAR} environment variable",
        )
    return token.strip()


def get_base_url(config: Dict[str, Any]) -> str:
    return str(config.get("BASE_URL") or CROCODOC_API_BASE_URL).rstrip("/")


def get_timeout(config: Dict[str, Any]) -> float:
    raw = config.get("TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
    try:
        timeout = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            "Invalid TIMEOUT value", details=f"{raw!r} is not a number"
        ) from e
    if timeout <= 0:
        raise ConfigurationError(
            "Invalid TIMEOUT value", details="TIMEOUT must be greater than zero"
        )
    return timeout
