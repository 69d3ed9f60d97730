"""Note and weekday types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

DAYS_IN_WEEK = 7
MAX_NOTE_LENGTH = 100


class NoteError(ValueError):
    """Raised when a note cannot be created from the given text or day."""


class Day(IntEnum):
    """Day of the week, numbered the way the notes file stores it."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def slot(self) -> int:
        """Position of this day's bucket in the store (0-6)."""
        return self.value - 1

    @classmethod
    def parse(cls, value: int | str) -> Day:
        """Convert an int or numeric string to a Day.

        Raises ValueError for non-numeric input or anything outside 1-7.
        """
        if isinstance(value, str):
            value = int(value.strip())
        if not 1 <= value <= DAYS_IN_WEEK:
            raise ValueError(f"day must be between 1 and {DAYS_IN_WEEK}, got {value}")
        return cls(value)


@dataclass(eq=False)
class Note:
    """A single text entry, linked to its neighbours in one day's list."""

    text: str
    day: Day
    prev: Note | None = field(default=None, repr=False)
    next: Note | None = field(default=None, repr=False)

    def detach(self) -> None:
        self.prev = None
        self.next = None

    def format(self) -> str:
        return f"{self.day.label:<10}: {self.text}"


def create_note(text: str, day: int | Day) -> Note:
    """Build an unlinked note.

    The text must be 1-100 characters on a single line; the day must be 1-7.
    """
    if not text.strip():
        raise NoteError("note text is empty")
    if len(text) > MAX_NOTE_LENGTH:
        raise NoteError(f"note text exceeds {MAX_NOTE_LENGTH} characters ({len(text)})")
    if text.splitlines() != [text]:
        raise NoteError("note text must fit on one line")
    try:
        parsed = Day.parse(day)
    except ValueError as e:
        raise NoteError(str(e)) from e
    return Note(text=text, day=parsed)
