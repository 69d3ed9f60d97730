"""Entry point: python -m weeknotes [chat|show FILE]

- No args / "chat": Interactive command loop
- "show FILE":      Print the notes stored in FILE and exit
"""

from __future__ import annotations

import logging
import sys

from weeknotes.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_cli() -> None:
    """Interactive command loop."""
    config = load_config()
    _setup_logging(config.log_level)

    from weeknotes.connectors.cli import CLIConnector

    CLIConnector(config=config).run()


def _run_show(filename: str) -> int:
    """Load a notes file into an empty store and print it."""
    config = load_config()
    _setup_logging(config.log_level)

    from weeknotes.notes import PersistenceError, WeekStore, load

    store = WeekStore()
    try:
        load(store, filename)
    except PersistenceError as e:
        print(e, file=sys.stderr)
        return 1
    for note in store.notes():
        print(note.format())
    return 0


def _usage() -> None:
    print("Usage: python -m weeknotes [chat|show FILE]")
    print("  chat        Interactive command loop (default)")
    print("  show FILE   Print the notes stored in FILE")


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    cmd = args[0] if args else "chat"

    if cmd == "chat":
        _run_cli()
    elif cmd == "show" and len(args) == 2:
        sys.exit(_run_show(args[1]))
    else:
        _usage()
        sys.exit(1)


if __name__ == "__main__":
    main()
