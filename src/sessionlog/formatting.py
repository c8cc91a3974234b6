"""Record formatting: timestamps, multi-line handling and line assembly."""

import re
from datetime import datetime
from urllib.parse import quote, unquote

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"

SINGLE_LINE_MARKER = "S "
MULTI_LINE_MARKER = "M"

# URI reserved characters are kept as-is; quote() always keeps unreserved ones.
_URI_RESERVED = ";/?:@&=+$,[]!*'()#"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def timestamp(now: datetime | None = None) -> str:
    """Return the local time as ``YYYYMMDD-HHMMSS``."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def is_multi_line(message: str) -> bool:
    """Return True if the message contains a carriage return or line feed."""
    return "\r" in message or "\n" in message


def linearize(message: str) -> str:
    """Percent-encode a message so it fits on a single line.

    Spaces, ``%``, CR, LF and non-ASCII characters are encoded (as UTF-8);
    URI reserved and unreserved characters are left untouched.
    """
    return quote(message, safe=_URI_RESERVED)


def delinearize(body: str) -> str:
    """Invert linearize()."""
    return unquote(body)


def split_lines(message: str) -> list[str]:
    """Split a message on any line break.

    A trailing line break ends the last line; it does not add an empty one.
    """
    lines = _LINE_BREAK.split(message)
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def multi_line_marker(tag: int | None) -> str:
    """Return ``"M "`` or, with a tag, ``"M(<tag>) "``."""
    if tag is None:
        return f"{MULTI_LINE_MARKER} "
    return f"{MULTI_LINE_MARKER}({tag}) "


def continuation_prefix(session: str, tag: int | None) -> str:
    """Return the comment prefix put in front of each continuation line."""
    if tag is None:
        return "\t# "
    return f"  # {session}-{tag} # "


def format_record(
    when: str,
    session: str,
    level_name: str,
    message: str,
    tag: int | None = None,
) -> str:
    """Build the full text of one record, newline-terminated.

    Single-line messages produce one line. Multi-line messages produce a
    header line carrying the linearized message, followed by the original
    lines, each behind a comment prefix.

    Args:
        when: Timestamp string (see timestamp()).
        session: Session identifier.
        level_name: 3-character severity name.
        message: Raw message.
        tag: Multi-line sequence number, or None for untagged output.

    Returns:
        Text to append to the log file.
    """
    if not is_multi_line(message):
        return f"{when} {session} {level_name} {SINGLE_LINE_MARKER}{message}\n"

    header = (
        f"{when} {session} {level_name} "
        f"{multi_line_marker(tag)}{linearize(message)}\n"
    )
    prefix = continuation_prefix(session, tag)
    block = "".join(f"{prefix}{line}\n" for line in split_lines(message))
    return header + block
