"""Entry stream builder — sequential line reads over a binary source."""

import logging
from typing import Generator, Protocol

from zsh_history_to_fish.decoder import decode
from zsh_history_to_fish.parser import Entry, parse_line

logger = logging.getLogger(__name__)


class LineSource(Protocol):
    def readline(self) -> bytes: ...


class AsyncLineSource(Protocol):
    async def readline(self) -> bytes: ...


def iter_entries(source: LineSource) -> Generator[Entry, None, None]:
    """Yield an Entry for each history record in *source*, in file order.

    Records are newline-terminated; ``readline()`` returning ``b""`` marks the
    end of the stream. I/O errors from the source propagate.
    """
    records = 0
    produced = 0

    while True:
        raw = source.readline()
        if not raw:
            break
        records += 1

        entry = parse_line(decode(raw))
        if entry is not None:
            produced += 1
            yield entry

    logger.debug("Read %d records, produced %d entries", records, produced)


def build(source: LineSource) -> list[Entry]:
    """Consume *source* fully and return its entries."""
    return list(iter_entries(source))


async def abuild(source: AsyncLineSource) -> list[Entry]:
    """Async counterpart of build() for sources with an awaitable readline()."""
    entries = []
    records = 0

    while True:
        raw = await source.readline()
        if not raw:
            break
        records += 1

        entry = parse_line(decode(raw))
        if entry is not None:
            entries.append(entry)

    logger.debug("Read %d records, produced %d entries", records, len(entries))
    return entries
