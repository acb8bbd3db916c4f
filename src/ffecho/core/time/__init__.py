from ffecho.core.time.abc import Time
from ffecho.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
