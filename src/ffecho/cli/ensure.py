"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages, and error_boundary() for
turning ffecho's error taxonomy into exit codes. All errors use red "Error:"
prefix for visual consistency.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any, NoReturn

import click

from ffecho.cli.json_output import emit_json_error
from ffecho.cli.output import user_output
from ffecho.core.errors import ExternalProcessError, FfechoError


def _fail(error_message: str, exit_code: int = 1) -> NoReturn:
    user_output(click.style("Error: ", fg="red") + error_message)
    raise SystemExit(exit_code)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            _fail(error_message)

    @staticmethod
    def not_none[T](value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing from `T | None` to `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            _fail(error_message)
        return value

    @staticmethod
    def process_succeeded(exit_code: int, description: str) -> None:
        """Ensure an external process exited cleanly.

        The invocation exits with the same code as the failed process.

        Args:
            exit_code: Exit code returned by the process
            description: What was being run (e.g., "bundle install")

        Raises:
            SystemExit: If exit_code is non-zero (with that exit code)
        """
        if exit_code != 0:
            _fail(f"{description} failed with exit code {exit_code}", exit_code)


def error_boundary(func: Callable) -> Callable:
    """Decorator converting FfechoError into a styled error and exit code.

    ExternalProcessError exits with the failed process's exit code; every
    other FfechoError exits with 1. When the command was invoked with
    --json (an 'output_json' kwarg), the error is emitted as JSON instead.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except FfechoError as e:
            exit_code = e.returncode if isinstance(e, ExternalProcessError) else 1
            if kwargs.get("output_json", False):
                emit_json_error(str(e), type(e).__name__, exit_code=exit_code)
            _fail(str(e), exit_code)

    return wrapper
