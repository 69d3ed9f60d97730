"""Interactive command loop driven by one-character commands over a Console."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from weeknotes.connectors.base import StdConsole
from weeknotes.notes import query
from weeknotes.notes.model import DAYS_IN_WEEK, MAX_NOTE_LENGTH, Day, Note, NoteError, create_note
from weeknotes.notes.persistence import PersistenceError, load, save
from weeknotes.notes.store import WeekStore

if TYPE_CHECKING:
    from weeknotes.config import WeeknotesConfig
    from weeknotes.connectors.base import Console

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "Command (a/d/p/f/s/r/h/q): "
FIND_PROMPT = "Method (i/k/t/l/c/h): "

HELP_TEXT = """\
Help for calendar manager:
a - Add a new note
d - Delete a note
p - Print existing notes
f - Find a note
s - Save the current notes to file
r - Read notes from file
h - Print this help text
q - Exit the program"""

FIND_HELP_TEXT = """\
Help for methods of finding notes.
i - Find by index
k - Find by keyword
t - Find by full text
l - Get the last item of a day
c - Cancel this command
h - Print this help text"""


class CLIConnector:
    """Read-eval loop over a single WeekStore.

    All state lives in the store; the loop itself keeps nothing between
    commands.
    """

    def __init__(
        self,
        store: WeekStore | None = None,
        console: Console | None = None,
        config: WeeknotesConfig | None = None,
    ) -> None:
        self.store = store if store is not None else WeekStore()
        self.console = console or StdConsole()
        self.default_file: Path | None = config.default_file if config else None
        self._autoload = config.autoload if config else False
        self._commands: dict[str, Callable[[], None]] = {
            "a": self.add_note,
            "d": self.delete_note,
            "p": self.print_notes,
            "f": self.find_note,
            "s": self.save_notes,
            "r": self.read_notes,
            "h": self.print_help,
        }

    # ── Loop ──────────────────────────────────────────────────

    def run(self) -> None:
        """Prompt for commands until 'q' or end of input."""
        self.console.write("Welcome to the Notes manager.")
        self.console.write()
        if self._autoload and self.default_file and self.default_file.exists():
            self._load_from(self.default_file)

        while True:
            try:
                command = self.console.read_line(COMMAND_PROMPT).strip()
                if command == "q":
                    break
                self.dispatch(command)
            except (EOFError, KeyboardInterrupt):
                self.console.write()
                break
        self.console.write("Bye!")

    def dispatch(self, command: str) -> bool:
        """Run one command. Returns False for input that is not a command."""
        handler = self._commands.get(command)
        if handler is None:
            return False
        handler()
        return True

    # ── Commands ──────────────────────────────────────────────

    def add_note(self) -> None:
        day = self._read_day()
        text = self.console.read_line(f"Note text ({MAX_NOTE_LENGTH}): ").strip()
        if len(text) > MAX_NOTE_LENGTH:
            self.console.write(f"Note truncated to {MAX_NOTE_LENGTH} characters.")
            text = text[:MAX_NOTE_LENGTH]
        try:
            note = create_note(text, day)
        except NoteError as e:
            logger.warning("Rejected note: %s", e)
            self.console.write(f"Invalid note: {e}.")
            return
        self.store.add(note)

    def delete_note(self) -> None:
        target = self.choose_note()
        if target is None:
            self.console.write("Nothing to delete!")
            return
        self.console.write(f"Deleting note: {target.text}")
        self.store.remove(target)

    def print_notes(self) -> None:
        for note in self.store.notes():
            self.console.write(note.format())

    def find_note(self) -> None:
        found = self.choose_note()
        if found is not None:
            self.console.write(found.format())

    def save_notes(self) -> None:
        path = self._read_filename()
        if path is None:
            return
        try:
            save(self.store, path)
        except PersistenceError as e:
            self.console.write(str(e))

    def read_notes(self) -> None:
        path = self._read_filename()
        if path is None:
            return
        self._load_from(path)

    def print_help(self) -> None:
        self.console.write(HELP_TEXT)

    # ── Find menu ─────────────────────────────────────────────

    def choose_note(self) -> Note | None:
        """Ask for a search method and run it. Returns the note found, if any."""
        while True:
            method = self.console.read_line(FIND_PROMPT).strip()
            if method == "i":
                return self._find_by_index()
            if method == "k":
                keyword = self.console.read_line(f"Keyword ({MAX_NOTE_LENGTH}): ").strip()
                return query.find_by_keyword(self.store, keyword[:MAX_NOTE_LENGTH])
            if method == "t":
                text = self.console.read_line(f"Text ({MAX_NOTE_LENGTH}): ").strip()
                return query.find_by_text(self.store, text[:MAX_NOTE_LENGTH])
            if method == "l":
                return query.find_last(self.store, self._read_day())
            if method == "c":
                return None
            if method == "h":
                self.console.write(FIND_HELP_TEXT)
                return None
            self.console.write("Invalid command entered. Please try again.")

    def _find_by_index(self) -> Note | None:
        day = self._read_day()
        length = self.store.count(day)
        if length == 0:
            self.console.write("The list for this day is empty.")
            return None
        while True:
            raw = self.console.read_line(f"Index (1-{length}): ")
            try:
                index = int(raw.strip())
            except ValueError:
                index = 0
            if 1 <= index <= length:
                return query.find_by_index(self.store, day, index)
            self.console.write("Invalid index entered. Please try again.")

    # ── Prompts ───────────────────────────────────────────────

    def _read_day(self) -> Day:
        while True:
            raw = self.console.read_line(f"Day of the week (1-{DAYS_IN_WEEK}): ")
            try:
                return Day.parse(raw)
            except ValueError:
                self.console.write("Invalid day entered.")

    def _read_filename(self) -> Path | None:
        if self.default_file:
            raw = self.console.read_line(f"File [{self.default_file}]: ").strip()
            return Path(raw) if raw else self.default_file
        raw = self.console.read_line("File: ").strip()
        if not raw:
            self.console.write("No file name given.")
            return None
        return Path(raw)

    def _load_from(self, path: Path) -> None:
        try:
            result = load(self.store, path)
        except PersistenceError as e:
            self.console.write(str(e))
            return
        self.console.write(f"Read {result.read} notes. Now {result.total} notes total.")
