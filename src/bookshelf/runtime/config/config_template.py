"""Configuration template substitution utilities."""

import os
import re
from collections.abc import Mapping
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.bookshelf.runtime.config.config_data import ConfigData
from src.bookshelf.runtime.config.settings import EnvironmentVariables

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str, environ: Mapping[str, str] | None = None) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    env = os.environ if environ is None else environ

    def replacer(match):
        var_expr = match.group(1)

        # Handle default values: ${VAR:-default}
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return env.get(var_name, default)

        # Handle error messages: ${VAR:?message}
        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = env.get(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        # Handle required variables: ${VAR}
        else:
            var_name = var_expr
            value = env.get(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name} not set")
            return value

    return _PLACEHOLDER.sub(replacer, text)


def environment_overrides(env_mode: str, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the environment with mode-prefixed variables applied.

    With env_mode "test", TEST_DATABASE_URL overrides DATABASE_URL.
    """
    env = dict(os.environ if environ is None else environ)
    prefix = f"{env_mode.upper()}_"
    overrides = {name[len(prefix):]: value for name, value in env.items() if name.startswith(prefix)}
    if overrides:
        logger.info("Applying {} environment-specific overrides: {}", env_mode, sorted(overrides))
    env.update(overrides)
    return env


def load_templated_yaml(file_path: Path, env_mode: str | None = None) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file
        env_mode: Environment mode; read from APP_ENVIRONMENT when omitted

    Returns:
        Parsed YAML with environment variables substituted

    Raises:
        ValueError: If required environment variables are missing
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    if env_mode is None:
        env_mode = EnvironmentVariables().environment
    logger.info("Loading configuration for environment: {}", env_mode)

    substituted_content = substitute_env_vars(content, environment_overrides(env_mode))

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        # Extract the 'config' section from the YAML structure
        config_data = loaded.get("config", {})
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if config.app.environment != env_mode:
        logger.warning(
            "config.yaml declares environment '{}' but APP_ENVIRONMENT is '{}'",
            config.app.environment,
            env_mode,
        )

    return config


def load_default_config() -> ConfigData:
    """Load the config file named by APP_CONFIG_FILE, falling back to built-in defaults."""
    env_vars = EnvironmentVariables()
    path = Path(env_vars.config_file)
    if not path.exists():
        logger.warning("{} not found; using default configuration", path)
        return ConfigData(app={"environment": env_vars.environment})
    return load_templated_yaml(path, env_vars.environment)
