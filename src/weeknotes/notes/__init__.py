"""Notes filed by weekday.

Layout:
    model.py        # Day enum, Note, create_note
    store.py        # per-day doubly-linked lists + WeekStore
    query.py        # index / keyword / text / last-of-day lookups
    persistence.py  # two-lines-per-note text file
"""

from weeknotes.notes.model import DAYS_IN_WEEK, MAX_NOTE_LENGTH, Day, Note, NoteError, create_note
from weeknotes.notes.persistence import LoadResult, PersistenceError, load, save
from weeknotes.notes.store import WeekStore

__all__ = [
    "DAYS_IN_WEEK",
    "MAX_NOTE_LENGTH",
    "Day",
    "LoadResult",
    "Note",
    "NoteError",
    "PersistenceError",
    "WeekStore",
    "create_note",
    "load",
    "save",
]
