"""Linear lookups across the week's buckets.

All searches walk Sunday→Saturday and, within a day, in insertion order;
the first match wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weeknotes.notes.model import Day, Note
from weeknotes.notes.store import iter_notes, last_note

if TYPE_CHECKING:
    from weeknotes.notes.store import WeekStore


def find_by_index(store: WeekStore, day: int | Day, index: int) -> Note | None:
    """Return the ``index``-th note (1-based) of ``day``.

    An index past the end of the list yields the last note. Returns None for
    an empty day.
    """
    if index < 1:
        raise ValueError(f"index must be 1 or greater, got {index}")
    found = None
    for position, note in enumerate(iter_notes(store.head(day)), start=1):
        found = note
        if position == index:
            break
    return found


def find_by_keyword(store: WeekStore, keyword: str) -> Note | None:
    """First note whose text contains ``keyword`` (case-sensitive)."""
    for note in store.notes():
        if keyword in note.text:
            return note
    return None


def find_by_text(store: WeekStore, text: str) -> Note | None:
    """First note whose text equals ``text`` exactly."""
    for note in store.notes():
        if note.text == text:
            return note
    return None


def find_last(store: WeekStore, day: int | Day) -> Note | None:
    return last_note(store.head(day))
