"""Severity levels and their 3-character short names.

Lower numeric value means more urgent. The lookup tables are built once at
import time and never change afterwards.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Any


class InvalidLevelError(ValueError):
    """Raised when a value does not name one of the defined severities."""

    pass


class Severity(IntEnum):
    """Ordered severity of a log record (0 = most urgent)."""

    CRITICAL = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5
    TRACE = 6


_LEVEL_TO_NAME = MappingProxyType(
    {
        Severity.CRITICAL: "CRI",
        Severity.FATAL: "FAT",
        Severity.ERROR: "ERR",
        Severity.WARNING: "WAR",
        Severity.INFO: "INF",
        Severity.DEBUG: "DEB",
        Severity.TRACE: "TRA",
    }
)
_NAME_TO_LEVEL = MappingProxyType({name: level for level, name in _LEVEL_TO_NAME.items()})


def level_from_name(name: str) -> Severity | None:
    """Return the severity for a short name such as ``"war"``.

    Args:
        name: 3-character short name, any case.

    Returns:
        The matching Severity, or None if the name is unknown.
    """
    if not isinstance(name, str):
        return None
    return _NAME_TO_LEVEL.get(name.upper())


def name_from_level(level: Any) -> str | None:
    """Return the short name for a Severity or its integer value, or None."""
    if isinstance(level, bool) or not isinstance(level, int):
        return None
    try:
        return _LEVEL_TO_NAME.get(Severity(level))
    except ValueError:
        return None


def all_level_names() -> list[str]:
    """Return every short name, most urgent first."""
    return [_LEVEL_TO_NAME[level] for level in sorted(_LEVEL_TO_NAME)]


def parse_level(value: Any) -> Severity:
    """Convert a user-supplied level into a Severity.

    Accepts a Severity, an int in 0..6, a short name (``"DEB"``), a full
    name (``"debug"``), or a string of digits.

    Raises:
        InvalidLevelError: If the value does not denote a defined severity.
    """
    if isinstance(value, Severity):
        return value
    if isinstance(value, bool):
        raise InvalidLevelError(f"Unexpected value for the log level ({value!r})")
    if isinstance(value, int):
        try:
            return Severity(value)
        except ValueError as e:
            raise InvalidLevelError(
                f"Unexpected value for the log level ({value!r})"
            ) from e
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return parse_level(int(text))
        level = level_from_name(text)
        if level is not None:
            return level
        try:
            return Severity[text.upper()]
        except KeyError:
            pass
    raise InvalidLevelError(f"Unexpected value for the log level ({value!r})")
