"""sessionlog: a leveled, session-tagged file logger."""

from sessionlog.logging import Logger, LogWriteError
from sessionlog.session import generate_session_id
from sessionlog.severity import (
    InvalidLevelError,
    Severity,
    all_level_names,
    level_from_name,
    name_from_level,
    parse_level,
)

__all__ = [
    "InvalidLevelError",
    "LogWriteError",
    "Logger",
    "Severity",
    "all_level_names",
    "generate_session_id",
    "level_from_name",
    "name_from_level",
    "parse_level",
]
