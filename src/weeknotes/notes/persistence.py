"""Plain-text notes file: two lines per note, weekday number then text.

    1
    Rest
    6
    Gym

Notes are written grouped by ascending weekday and in insertion order
within a day. There is no header or footer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from weeknotes.notes.model import Day, Note, create_note

if TYPE_CHECKING:
    from collections.abc import Iterator

    from weeknotes.notes.store import WeekStore

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """A notes file could not be opened, read or written.

    The message is suitable for showing to the user as-is.
    """


@dataclass
class LoadResult:
    """Outcome of reading a notes file into a store."""

    read: int
    total: int


def save(store: WeekStore, path: Path | str) -> int:
    """Write every note in ``store`` to ``path``. Returns the count written."""
    path = Path(path)
    try:
        f = path.open("w", encoding="utf-8", newline="\n")
    except OSError as e:
        logger.error("Cannot open %s for writing: %s", path, e)
        raise PersistenceError(f"Failed to open file: '{path}'.") from e

    written = 0
    with f:
        for note in store.notes():
            try:
                f.write(f"{int(note.day)}\n{note.text}\n")
            except OSError as e:
                logger.error("Write to %s failed after %d notes: %s", path, written, e)
                raise PersistenceError("Writing to file failed.") from e
            written += 1
    logger.info("Saved %d notes to %s", written, path)
    return written


def load(store: WeekStore, path: Path | str) -> LoadResult:
    """Append the notes stored in ``path`` to ``store``.

    Stops quietly at the first incomplete or malformed record; notes read
    before it are kept.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        raise PersistenceError(f"Failed to open file '{path}'.") from e

    read = 0
    for note in parse_notes(content):
        store.add(note)
        read += 1
    total = store.total()
    logger.info("Read %d notes from %s (%d total)", read, path, total)
    return LoadResult(read=read, total=total)


def parse_notes(content: str) -> Iterator[Note]:
    """Yield notes from file content, ending at the first bad record."""
    # Only "\n" ends a line; blank lines are skipped between records only.
    lines = (line.rstrip("\r") for line in content.split("\n"))
    for day_line in lines:
        if not day_line.strip():
            continue
        text = next(lines, None)
        if text is None:
            logger.warning("Notes file ends with a day and no text")
            return
        try:
            yield create_note(text, Day.parse(day_line))
        except ValueError as e:
            logger.warning("Stopped reading at malformed record (%r, %r): %s", day_line, text, e)
            return
