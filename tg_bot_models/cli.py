"""
CLI entry point for tg-bot-models.

Developer tooling around the model layer: list the known wire models,
validate and normalise JSON documents, and manage configuration.
"""

# ruff: noqa: PLC0415 (intentional lazy imports to keep startup light)
import sys

import typer
from typer import Typer

from tg_bot_models.config import get_config
from tg_bot_models.logging import setup_logging_from_config

app = Typer(
    name="tg-bot-models",
    help="Telegram Bot API wire models",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events to stderr"),
):
    """
    Telegram Bot API wire models.
    """
    setup_logging_from_config(get_config().logging, verbose=verbose)


@app.command()
def models():
    """
    List the models that can be decoded.
    """
    from tg_bot_models.commands.decode import list_models

    sys.exit(list_models())


@app.command()
def decode(
    model: str = typer.Argument(..., help="Model name, e.g. EditMessageTextPayload"),
    path: str = typer.Argument("-", help="JSON file to read, or - for stdin"),
):
    """
    Decode a JSON document and print its canonical projection.
    """
    from tg_bot_models.commands.decode import main as decode_main

    sys.exit(decode_main(model, path))


@app.command()
def config(
    key: str | None = None,
    value: str | None = None,
    delete: bool = False,
):
    """
    Configuration management.
    """
    from tg_bot_models.commands.config import main as config_main

    sys.exit(config_main(key=key, value=value, delete=delete))


if __name__ == "__main__":
    app()
