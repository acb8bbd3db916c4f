"""Real clock implementation using datetime.now()."""

from datetime import datetime

from ffecho.core.time.abc import Time


class RealTime(Time):
    """Production implementation reading the system clock."""

    def now(self) -> datetime:
        return datetime.now().astimezone()
