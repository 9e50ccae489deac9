"""
Config command implementation.

This module implements configuration management commands:
- Show the merged configuration
- Get configuration values
- Set configuration values
- Delete configuration values
"""

import toml
import typer
from pydantic import ValidationError

from tg_bot_models.config import Config
from tg_bot_models.constants import EXIT_ERROR, EXIT_SUCCESS


def get_value(key: str) -> str | None:
    """
    Get configuration value by dot-separated key.

    Args:
        key: Dot-separated key (e.g., "logging.level")

    Returns:
        Configuration value as string, or None if the key is unknown
    """
    config = Config()
    value = config.get(key)
    if value is None:
        typer.echo(f"Key not found: {key}", err=True)
        return None
    return str(value)


def set_value(key: str, value: str) -> None:
    """
    Set configuration value by dot-separated key.

    TOML scalars are parsed, so "4" is stored as an integer and "true" as
    a boolean. The merged result must still validate.

    Args:
        key: Dot-separated key (e.g., "output.indent")
        value: Value to set

    Raises:
        pydantic.ValidationError: If the new value is invalid
    """
    config = Config()
    config.set(key, _parse_scalar(value))
    config.as_model()
    config.save()
    typer.echo(f"Set {key} = {value}")


def delete_value(key: str) -> None:
    """
    Delete configuration value by dot-separated key.

    Args:
        key: Dot-separated key (e.g., "logging.file")
    """
    config = Config()
    config.delete(key)
    config.save()
    typer.echo(f"Deleted {key}")


def _parse_scalar(value: str) -> object:
    try:
        return toml.loads(f"v = {value}")["v"]
    except (toml.TomlDecodeError, ValueError, IndexError):
        return value


def main(key: str | None = None, value: str | None = None, delete: bool = False) -> int:
    """
    Main entry point for config command.

    Args:
        key: Configuration key
        value: Configuration value to set
        delete: Delete the configuration key

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        if key and value is not None:
            set_value(key, value)
        elif key and delete:
            delete_value(key)
        elif key:
            result = get_value(key)
            if result is None:
                return EXIT_ERROR
            typer.echo(result)
        else:
            config = Config()
            typer.echo(f"# {config.config_path}")
            typer.echo(toml.dumps(config.to_dict()))
        return EXIT_SUCCESS
    except (OSError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        return EXIT_ERROR
