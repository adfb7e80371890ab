"""zsh-history-to-fish — read zsh history files into timestamped entries."""

from zsh_history_to_fish.converter import (
    AsyncConverter,
    Converter,
    HistoryFileNotFoundError,
)
from zsh_history_to_fish.decoder import decode
from zsh_history_to_fish.parser import Entry, parse_line
from zsh_history_to_fish.reader import abuild, build, iter_entries

__all__ = [
    "AsyncConverter",
    "Converter",
    "Entry",
    "HistoryFileNotFoundError",
    "abuild",
    "build",
    "decode",
    "iter_entries",
    "parse_line",
]
