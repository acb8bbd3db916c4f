"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from ffecho.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Status lines (for example, which vendoring mode was selected) go through
    ctx.feedback so that --quiet can suppress them without threading a flag
    through every function signature.

    Two modes:
    - Interactive: Show all diagnostics (info, success, errors)
    - Quiet: Suppress diagnostics, only show errors
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown, even in quiet mode)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet mode (only errors shown)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
