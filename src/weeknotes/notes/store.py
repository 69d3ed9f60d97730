"""Day bucket store: one doubly-linked list of notes per weekday.

The list functions work on a bucket's head note and return the head the
caller should keep, so a bucket can be emptied or re-headed by assignment.
``WeekStore`` owns the seven heads and keeps every note in the bucket
matching its day.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from weeknotes.notes.model import DAYS_IN_WEEK, Day, Note

logger = logging.getLogger(__name__)


# ── List operations ───────────────────────────────────────

def iter_notes(head: Note | None) -> Iterator[Note]:
    """Yield the notes of one list in order."""
    current = head
    while current is not None:
        yield current
        current = current.next


def count_notes(head: Note | None) -> int:
    return sum(1 for _ in iter_notes(head))


def last_note(head: Note | None) -> Note | None:
    """Return the last note in the list, or None if it is empty."""
    last = None
    for last in iter_notes(head):
        pass
    return last


def append_note(head: Note | None, note: Note | None) -> Note | None:
    """Append ``note`` after the last note. Returns the list's head."""
    if note is None:
        return head
    if head is None:
        note.prev = None
        return note
    tail = last_note(head)
    tail.next = note
    note.prev = tail
    return head


def delete_note(head: Note | None, target: Note | None) -> Note | None:
    """Unlink ``target`` and return the new head (None if the list emptied).

    A missing target leaves the list untouched.
    """
    if target is None:
        logger.warning("Nothing to delete")
        return head
    if not any(note is target for note in iter_notes(head)):
        logger.warning("Note %r is not in this list", target.text)
        return head

    if target.prev is None:
        new_head = target.next
        if new_head is not None:
            new_head.prev = None
        target.detach()
        return new_head

    target.prev.next = target.next
    if target.next is not None:
        target.next.prev = target.prev
    target.detach()
    return head


# ── Store ─────────────────────────────────────────────────

class WeekStore:
    """Seven buckets of notes, indexed by ``Day.slot``."""

    def __init__(self) -> None:
        self._heads: list[Note | None] = [None] * DAYS_IN_WEEK

    def head(self, day: int | Day) -> Note | None:
        return self._heads[Day.parse(day).slot]

    def add(self, note: Note) -> None:
        slot = note.day.slot
        self._heads[slot] = append_note(self._heads[slot], note)
        logger.debug("Added note to %s: %s", note.day.label, note.text)

    def remove(self, note: Note) -> bool:
        """Delete ``note`` from its bucket. Returns False if it was not stored."""
        slot = note.day.slot
        before = self._heads[slot]
        if not any(n is note for n in iter_notes(before)):
            logger.warning("Note %r not found under %s", note.text, note.day.label)
            return False
        self._heads[slot] = delete_note(before, note)
        logger.debug("Deleted note from %s: %s", note.day.label, note.text)
        return True

    def count(self, day: int | Day) -> int:
        return count_notes(self.head(day))

    def total(self) -> int:
        return sum(count_notes(head) for head in self._heads)

    def is_empty(self) -> bool:
        return all(head is None for head in self._heads)

    def notes(self, day: int | Day | None = None) -> Iterator[Note]:
        """Iterate notes in day order (Sunday first), then insertion order."""
        if day is not None:
            yield from iter_notes(self.head(day))
            return
        for head in self._heads:
            yield from iter_notes(head)

    def __len__(self) -> int:
        return self.total()

    def __iter__(self) -> Iterator[Note]:
        return self.notes()
