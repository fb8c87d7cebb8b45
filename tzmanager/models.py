"""
Data models and configuration classes for TimeZone Manager.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class ZoneEntry:
    """A selectable Windows time zone and the label shown next to it."""

    identifier: str
    label: str

    def __str__(self) -> str:
        return f"{self.identifier} ({self.label})"


DEFAULT_ZONES: Tuple[ZoneEntry, ...] = (
    ZoneEntry("GMT Standard Time", "London"),
    ZoneEntry("W. Europe Standard Time", "Berlin/Paris"),
    ZoneEntry("Eastern Standard Time", "New York"),
    ZoneEntry("Pacific Standard Time", "Los Angeles"),
    ZoneEntry("Iran Standard Time", "Tehran"),
    ZoneEntry("India Standard Time", "Delhi"),
    ZoneEntry("China Standard Time", "Beijing"),
)


@dataclass
class AppConfig:
    """Runtime configuration handed to the session controller."""

    state_file: Path
    tzutil_path: str = "tzutil.exe"
    zones: Tuple[ZoneEntry, ...] = field(default_factory=lambda: DEFAULT_ZONES)

    @property
    def menu_length(self) -> int:
        """Number of menu options: every zone plus the reset entry."""
        return len(self.zones) + 1


@dataclass
class TzUtilResult:
    """Outcome of one tzutil invocation."""

    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    launched: bool = True

    @property
    def ok(self) -> bool:
        return self.launched and self.returncode == 0
