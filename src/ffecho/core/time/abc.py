"""Clock abstraction for testing.

Default image tags and default event payloads are derived from the current
time; routing that through an ABC keeps command tests deterministic.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract clock operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time."""
        ...
