"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.book_api.runtime.config.config_data import ConfigData


# ${NAME}, ${NAME:-default} or ${NAME:?message}
_PLACEHOLDER = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<operator>:[-?])(?P<argument>[^}]*))?\}"
)


def substitute_env_vars(text: str) -> str:
    """Expand environment placeholders in ``text``.

    ``${NAME:-default}`` falls back to ``default`` when ``NAME`` is unset;
    ``${NAME}`` and ``${NAME:?message}`` require it.

    Raises:
        ValueError: a required variable is unset.
    """

    def expand(match: re.Match[str]) -> str:
        name, operator, argument = match.group("name", "operator", "argument")
        value = os.environ.get(name)
        if value is not None:
            return value
        if operator == ":-":
            return argument
        if operator == ":?":
            raise ValueError(f"Required environment variable {name}: {argument}")
        raise ValueError(f"Required environment variable {name} not set")

    return _PLACEHOLDER.sub(expand, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_NAME`` variables to ``NAME`` for the active environment.

    ``PRODUCTION_DATABASE_URL`` becomes ``DATABASE_URL`` when running in
    production, so one shell can carry settings for several environments.
    """
    prefix = f"{env_mode.upper()}_"
    env_variables = [
        (var, value) for var, value in os.environ.items() if var.startswith(prefix)
    ]
    if env_variables:
        logger.info(
            "Applying environment-specific overrides: {}",
            [name for name, _ in env_variables],
        )

    for var_name, var_value in env_variables:
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_mode: Active environment, used for prefixed overrides

    Returns:
        Parsed YAML with environment variables substituted

    Raises:
        ValueError: If required environment variables are missing or the
            file does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    logger.info("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        # Extract the 'config' section from the YAML structure
        config_data = loaded.get("config", {}) or {}
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    return config


def load_config(file_path: Path, env_mode: str = "development") -> ConfigData:
    """Load the configuration file, falling back to defaults when it is absent."""
    if not file_path.exists():
        logger.warning(
            "Configuration file {} not found; using built-in defaults", file_path
        )
        apply_environment_overrides(env_mode)
        return ConfigData()
    return load_templated_yaml(file_path, env_mode)
