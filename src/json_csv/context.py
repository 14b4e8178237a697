"""Diagnostic output shared by the converter and the CLI."""

from datetime import datetime

import click

from .models.config import ConvertConfig


def timestamp() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S %z")


def debug(config: ConvertConfig, message: str) -> None:
    """Write a timestamped line to stderr when debugging is on."""
    if config.debug:
        click.echo(f"{timestamp()}\t{message}", err=True)
