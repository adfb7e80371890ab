"""Open a zsh history file and convert it into entries.

Conversion is a two-step workflow: ``Converter.from_path()`` validates and
opens the file, and only the object it returns offers ``convert()``.
"""

import logging
import os
from typing import Generator

import aiofiles

from zsh_history_to_fish.parser import Entry
from zsh_history_to_fish.reader import abuild, build, iter_entries

logger = logging.getLogger(__name__)


class HistoryFileNotFoundError(FileNotFoundError):
    """Raised when the zsh history file does not exist."""


def _check_open(file) -> None:
    if file is None:
        raise ValueError("I/O operation on closed converter")


def _resolve(path) -> str:
    """Expand ``~`` and check that *path* exists."""
    resolved = os.path.expanduser(os.fspath(path))
    if not os.path.exists(resolved):
        raise HistoryFileNotFoundError(f"zsh history file does not exist: {resolved}")
    return resolved


class Converter:
    """Converts an opened zsh history file. Build one with from_path()."""

    def __init__(self, file, path: str = ""):
        self._file = file
        self.path = path

    @classmethod
    def from_path(cls, path) -> "Converter":
        resolved = _resolve(path)
        file = open(resolved, "rb")
        logger.debug("Opened %s", resolved)
        return cls(file, resolved)

    def _reader(self):
        """Return an independent binary reader over the same open file, rewound."""
        _check_open(self._file)
        reader = os.fdopen(os.dup(self._file.fileno()), "rb")
        reader.seek(0)
        return reader

    def convert(self) -> list[Entry]:
        """Read the whole history file and return its entries in file order."""
        with self._reader() as reader:
            entries = build(reader)
        logger.info("Converted %d entries from %s", len(entries), self.path)
        return entries

    def entries(self) -> Generator[Entry, None, None]:
        """Streaming form of convert()."""
        with self._reader() as reader:
            yield from iter_entries(reader)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "Converter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class AsyncConverter:
    """Converter over an aiofiles handle. Build one with ``await from_path()``."""

    def __init__(self, file, path: str = ""):
        self._file = file
        self.path = path

    @classmethod
    async def from_path(cls, path) -> "AsyncConverter":
        resolved = _resolve(path)
        file = await aiofiles.open(resolved, mode="rb")
        logger.debug("Opened %s", resolved)
        return cls(file, resolved)

    async def convert(self) -> list[Entry]:
        _check_open(self._file)
        await self._file.seek(0)
        entries = await abuild(self._file)
        logger.info("Converted %d entries from %s", len(entries), self.path)
        return entries

    async def close(self) -> None:
        if self._file is not None:
            await self._file.close()
            self._file = None

    async def __aenter__(self) -> "AsyncConverter":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()
