"""Output utilities for CLI commands with clear intent.

Human-facing messages go to stderr through user_output(); data meant for
piping or parsing goes to stdout through machine_output().
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write machine-readable data to stdout."""
    click.echo(message, nl=nl)
