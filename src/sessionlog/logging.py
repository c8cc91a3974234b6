"""Leveled, session-tagged file logger.

Each call appends one record to the log file, opening and closing the file
around the write so that independent processes can share the same path.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .formatting import format_record, is_multi_line, timestamp
from .session import generate_session_id
from .severity import Severity, name_from_level, parse_level

if TYPE_CHECKING:
    from .config import LoggerConfig


class LogWriteError(Exception):
    """Raised when a record cannot be appended and raise_on_error is set."""

    pass


class Logger:
    """Logger that appends records at or above a severity threshold.

    Records look like ``20261019-142501 1914250112345 ERR S disk full``.
    Multi-line messages are linearized on the record line and repeated
    verbatim below it, one comment-prefixed line at a time.

    Write failures (including messages that cannot be encoded as UTF-8) are
    handled according to ``raise_on_error``: by default a
    diagnostic goes to stderr and the log method returns False; when set,
    LogWriteError is raised instead.
    """

    def __init__(
        self,
        path: Path | str,
        level: Severity | int | str,
        session: str | None = None,
        *,
        tag_multi_line: bool = True,
        raise_on_error: bool = False,
    ) -> None:
        """Initialize the logger.

        Args:
            path: Path to the log file. Created on first write.
            level: Least urgent severity that is still written.
            session: Session identifier. Generated when None.
            tag_multi_line: Number multi-line records as ``M(<n>)``.
            raise_on_error: Raise LogWriteError instead of returning False.

        Raises:
            InvalidLevelError: If level is not one of the defined severities.
        """
        self._level = parse_level(level)
        self._path = Path(path)
        self._session = session if session is not None else generate_session_id()
        self._tag_multi_line = tag_multi_line
        self._raise_on_error = raise_on_error
        self._next_tag = 1

    @classmethod
    def from_config(cls, config: LoggerConfig) -> Logger:
        """Create a logger from a loaded LoggerConfig."""
        return cls(
            config.path,
            config.level,
            config.session,
            tag_multi_line=config.tag_multi_line,
            raise_on_error=config.raise_on_error,
        )

    @property
    def path(self) -> Path:
        """Return the path to the log file."""
        return self._path

    @property
    def level(self) -> Severity:
        """Return the severity threshold."""
        return self._level

    @property
    def session(self) -> str:
        """Return the session identifier."""
        return self._session

    def enabled_for(self, severity: Severity | int) -> bool:
        """Return True if a record at this severity would be written."""
        return severity <= self._level

    def _write(self, severity: Severity, message: str) -> bool:
        """Append a record to the log file.

        Args:
            severity: Severity of the record.
            message: The message to log.

        Returns:
            True if the record was written or filtered out, False on failure.
        """
        if not self.enabled_for(severity):
            return True

        tag = None
        if self._tag_multi_line and is_multi_line(message):
            tag = self._next_tag

        try:
            # Encoded up front so an unencodable message never opens the file.
            record = format_record(
                timestamp(),
                self._session,
                name_from_level(severity),
                message,
                tag=tag,
            ).encode("utf-8")
            with self._path.open("ab") as f:
                f.write(record)
        except (OSError, UnicodeError) as e:
            if self._raise_on_error:
                raise LogWriteError(
                    f"Can not write to log file {self._path}: {e}"
                ) from e
            print(
                f"[sessionlog] Error: can not write to log file {self._path}: {e}",
                file=sys.stderr,
                flush=True,
            )
            return False

        if tag is not None:
            self._next_tag += 1
        return True

    def log(self, severity: Any, message: str) -> bool:
        """Log a message at a severity given as a Severity, int or name.

        Raises:
            InvalidLevelError: If severity is not a defined severity.
        """
        return self._write(parse_level(severity), message)

    def critical(self, message: str) -> bool:
        """Log a CRITICAL message. Never filtered out."""
        return self._write(Severity.CRITICAL, message)

    def fatal(self, message: str) -> bool:
        """Log a FATAL message."""
        return self._write(Severity.FATAL, message)

    def error(self, message: str) -> bool:
        """Log an ERROR message."""
        return self._write(Severity.ERROR, message)

    def warning(self, message: str) -> bool:
        """Log a WARNING message."""
        return self._write(Severity.WARNING, message)

    def info(self, message: str) -> bool:
        """Log an INFO message."""
        return self._write(Severity.INFO, message)

    def debug(self, message: str) -> bool:
        """Log a DEBUG message."""
        return self._write(Severity.DEBUG, message)

    def trace(self, message: str) -> bool:
        """Log a TRACE message."""
        return self._write(Severity.TRACE, message)
