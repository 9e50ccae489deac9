"""
Decode command implementation.

Reads a wire document, decodes it into the named model, and prints the
model's canonical projection. Useful for checking captured payloads and
updates against the models.
"""

import sys
from pathlib import Path

import typer

from tg_bot_models.config import get_config
from tg_bot_models.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR
from tg_bot_models.core.serialization import dumps
from tg_bot_models.exceptions import InvalidPayloadError, SerializationError
from tg_bot_models.logging import get_logger
from tg_bot_models.models import WIRE_MODELS

logger = get_logger(__name__)


def list_models() -> int:
    """
    Print the registered model names, one per line.

    Returns:
        Exit code
    """
    for name in sorted(WIRE_MODELS):
        typer.echo(name)
    return EXIT_SUCCESS


def read_document(path: str) -> str:
    """
    Read document text from a file, or from stdin when path is "-".

    Raises:
        OSError: If the file cannot be read
    """
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(model: str, path: str = "-") -> int:
    """
    Main entry point for decode command.

    Args:
        model: Name of the model to decode into
        path: File path, or "-" for stdin

    Returns:
        Exit code (0 for success, 1 for invalid input, 2 for unknown model)
    """
    model_class = WIRE_MODELS.get(model)
    if model_class is None:
        typer.echo(f"Unknown model: {model}. Run 'tg-bot-models models' to list them.", err=True)
        return EXIT_USAGE_ERROR

    try:
        raw = read_document(path)
    except OSError as e:
        typer.echo(f"Error: cannot read {path}: {e}", err=True)
        return EXIT_ERROR

    output = get_config().output
    try:
        instance = model_class.from_json(raw)
        rendered = dumps(
            instance.to_dict(),
            indent=output.get("indent") or None,
            ensure_ascii=output.get("ensure_ascii", False),
            sort_keys=output.get("sort_keys", False),
        )
    except InvalidPayloadError as e:
        logger.debug("Rejected document", model=model, source=path, errors=len(e.errors))
        typer.echo(f"Invalid {e.model}:", err=True)
        for message in e.errors:
            typer.echo(f"  - {message}", err=True)
        return EXIT_ERROR
    except SerializationError as e:
        typer.echo(f"Error: {e}", err=True)
        return EXIT_ERROR

    logger.debug("Decoded document", model=model, source=path)
    typer.echo(rendered)
    return EXIT_SUCCESS
