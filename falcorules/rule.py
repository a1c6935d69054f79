"""Rule records, priorities and the engine version."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

ENGINE_VERSION = 17

FIELDS_CHECKSUM = "8684342b994f61ca75a1a494e1197b86b53715c59ad60de3768d4d74ea4ba2c9"


class Priority(enum.IntEnum):
    """Rule severity; lower values are more severe."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7


_LONG_NAMES = {
    Priority.EMERGENCY: "Emergency",
    Priority.ALERT: "Alert",
    Priority.CRITICAL: "Critical",
    Priority.ERROR: "Error",
    Priority.WARNING: "Warning",
    Priority.NOTICE: "Notice",
    Priority.INFORMATIONAL: "Informational",
    Priority.DEBUG: "Debug",
}

_SHORT_NAMES = {**_LONG_NAMES, Priority.INFORMATIONAL: "Info"}

_PARSE_TABLE = {name.lower(): prio for prio, name in _LONG_NAMES.items()}
_PARSE_TABLE["info"] = Priority.INFORMATIONAL


def parse_priority(text: str) -> Priority:
    """Parse a priority name, case-insensitively.

    Raises ValueError for an unknown name.
    """
    try:
        return _PARSE_TABLE[text.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown priority value: {text!r}") from None


def format_priority(priority: Priority, short: bool = False) -> str:
    """Return the display name of a priority, optionally abbreviated."""
    table = _SHORT_NAMES if short else _LONG_NAMES
    return table[Priority(priority)]


def engine_version() -> int:
    """Return the version of rules and fields supported by the engine."""
    return ENGINE_VERSION


@dataclass
class FalcoRule:
    """A compiled rule; its id is unique across the loaded rules."""

    id: int = 0
    source: str = ""
    name: str = ""
    description: str = ""
    output: str = ""
    tags: set[str] = field(default_factory=set)
    exception_fields: set[str] = field(default_factory=set)
    priority: Priority = Priority.DEBUG