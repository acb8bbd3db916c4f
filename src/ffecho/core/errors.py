"""Error taxonomy for ffecho.

Every failure either aborts the invocation or is printed to the user as the
literal response data; nothing here is treated as silently recoverable.
"""

from pathlib import Path


class FfechoError(Exception):
    """Base class for all ffecho errors."""


class ConfigurationError(FfechoError):
    """Invalid flag value, config entry, or missing required argument.

    Raised before any side effect takes place.
    """


class MissingSourceError(FfechoError, FileNotFoundError):
    """One or more framework source roots required for vendoring are absent."""

    def __init__(self, missing: list[Path]) -> None:
        self.missing = missing
        listing = ", ".join(str(path) for path in missing)
        super().__init__(f"Framework source not found: {listing}")


class TransportError(FfechoError):
    """Connection failure or timeout while talking to a running instance.

    Non-2xx responses are NOT transport errors; they are returned as data.
    """


class ExternalProcessError(FfechoError):
    """A spawned build/test/deploy process failed or could not be launched."""

    def __init__(self, message: str, returncode: int = 1) -> None:
        self.returncode = returncode
        super().__init__(message)
