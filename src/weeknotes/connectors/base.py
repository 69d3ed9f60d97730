"""Console protocol and the stdin/stdout implementation."""

from __future__ import annotations

import sys
from typing import BinaryIO, Protocol, TextIO, runtime_checkable


@runtime_checkable
class Console(Protocol):
    """Line-based terminal the command loop talks to."""

    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` and return the next line without its newline.

        Raises EOFError when input is exhausted.
        """
        ...

    def write(self, text: str = "") -> None:
        """Print one line of output."""
        ...


class StdConsole:
    """Reads raw bytes from stdin, writes to stdout.

    Undecodable input is replaced rather than raised.
    """

    def __init__(self, stdin: BinaryIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> BinaryIO:
        return self._stdin or sys.stdin.buffer

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    def read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        raw = self.stdin.readline()
        if not raw:
            raise EOFError
        return raw.decode("utf-8", errors="replace").rstrip("\r\n")

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)
