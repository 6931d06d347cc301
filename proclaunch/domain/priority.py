"""Scheduling priority classes for launched processes."""

from __future__ import annotations

import subprocess
from enum import Enum

_NICE_INCREMENTS = {
    "idle": 19,
    "below_normal": 10,
    "normal": 0,
    "above_normal": -5,
    "high": -10,
    "realtime": -20,
}

# Only defined by the subprocess module on Windows.
_WINDOWS_FLAG_NAMES = {
    "idle": "IDLE_PRIORITY_CLASS",
    "below_normal": "BELOW_NORMAL_PRIORITY_CLASS",
    "normal": "NORMAL_PRIORITY_CLASS",
    "above_normal": "ABOVE_NORMAL_PRIORITY_CLASS",
    "high": "HIGH_PRIORITY_CLASS",
    "realtime": "REALTIME_PRIORITY_CLASS",
}


class ProcessPriority(str, Enum):
    """Platform-neutral scheduling class."""

    IDLE = "idle"
    BELOW_NORMAL = "below_normal"
    NORMAL = "normal"
    ABOVE_NORMAL = "above_normal"
    HIGH = "high"
    REALTIME = "realtime"

    @property
    def nice_increment(self) -> int:
        """Returns the POSIX nice increment equivalent to this class."""

        return _NICE_INCREMENTS[self.value]

    def creation_flag(self) -> int | None:
        """Returns the Windows ``creationflags`` bit, or None on other platforms."""

        return getattr(subprocess, _WINDOWS_FLAG_NAMES[self.value], None)
