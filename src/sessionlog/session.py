"""Session identifier generation."""

import os
from datetime import datetime


def generate_session_id(now: datetime | None = None, pid: int | None = None) -> str:
    """Generate a session ID from the local clock and the process ID.

    The day, hour, minute and second of the local time are read as a single
    number (so a leading zero on the day is dropped) and the process ID is
    appended to it. Two processes on the same host only collide if they share
    a PID within the same second; IDs from different hosts may collide.

    Args:
        now: Time to use instead of the current local time.
        pid: Process ID to use instead of the current one.

    Returns:
        Session ID made only of digits, e.g. ``"1914302212345"``.
    """
    if now is None:
        now = datetime.now()
    if pid is None:
        pid = os.getpid()
    return f"{int(now.strftime('%d%H%M%S'))}{pid}"
