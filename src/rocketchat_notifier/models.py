from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class StateCategory(StrEnum):
    OK = "OK"
    WARNING = "WARNING"
    PROBLEM = "PROBLEM"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def of(cls, state: str) -> StateCategory:
        """Classify a raw Icinga state label (exact, case-sensitive match)."""
        if state in ("UP", "OK"):
            return cls.OK
        if state == "WARNING":
            return cls.WARNING
        if state in ("DOWN", "CRITICAL"):
            return cls.PROBLEM
        return cls.UNKNOWN

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def punctuation(self) -> str:
        return "." if self is StateCategory.OK else "!"


_ICONS = {
    StateCategory.OK: "white_check_mark",
    StateCategory.WARNING: "warning",
    StateCategory.PROBLEM: "exclamation",
    StateCategory.UNKNOWN: "question",
}


@dataclass(frozen=True)
class Event:
    """A single host or service check result."""

    timestamp: int
    reports_service: bool
    state: str
    output: str

    @property
    def category(self) -> StateCategory:
        return StateCategory.of(self.state)


@dataclass(frozen=True)
class Target:
    """The monitored host and, in service mode, the service on it."""

    host_name: str
    host_display_name: str
    host_action_url: str = ""
    service_name: str = ""
    service_display_name: str = ""
    service_action_url: str = ""
