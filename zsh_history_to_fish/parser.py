"""zsh history line parser — frozen dataclass + compiled regex."""

import re
from dataclasses import dataclass

# extended history: ": <start>:<elapsed>;<command>"
HISTORY_PATTERN = re.compile(r"^: (\d+):(?:0;)?(.+)$", re.ASCII)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

# Unicode White_Space, which excludes \x1c-\x1f
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass(frozen=True)
class Entry:
    command: str
    timestamp: int = 0  # 0 means the history line carried no timestamp

    def __str__(self) -> str:
        return f"- cmd: {self.command}\n  when: {self.timestamp}"


def _parse_timestamp(digits: str) -> int | None:
    """Convert the timestamp field, returning None outside the int64 range."""
    value = int(digits)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def parse_line(line: str) -> Entry | None:
    """Parse a single decoded history line into an Entry.

    Returns None for continuation lines (trailing backslash), which belong to
    a multi-line command that is not reassembled. Anything that is not in the
    extended format becomes a plain command with timestamp 0.
    """
    stripped = line.strip(_WHITESPACE)

    if stripped.endswith("\\"):
        return None

    match = HISTORY_PATTERN.fullmatch(stripped)
    if match:
        timestamp = _parse_timestamp(match.group(1))
        if timestamp is not None:
            return Entry(command=match.group(2), timestamp=timestamp)

    return Entry(command=stripped, timestamp=0)
