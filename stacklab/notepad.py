"""A note pad whose additions can be undone and redone."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MAX_ENTRIES = 100


class StackFullError(Exception):
    """Raised when the note pad cannot hold another entry."""


class Notepad:
    """Ordered entries with undo and redo of additions."""

    def __init__(self, capacity: int = MAX_ENTRIES) -> None:
        self.capacity = capacity
        self._done: list[str] = []
        self._undone: list[str] = []

    def add(self, text: str) -> None:
        """Append an entry; any undone entries are forgotten."""
        full = len(self._done) >= self.capacity
        self._undone.clear()
        if full:
            raise StackFullError("the note pad is full")
        self._done.append(text)

    def undo(self) -> str | None:
        """Remove the latest entry and return it, or None if there is none."""
        if not self._done:
            return None
        text = self._done.pop()
        self._undone.append(text)
        return text

    def redo(self) -> str | None:
        """Restore the latest undone entry and return it, or None if there is none."""
        if not self._undone:
            return None
        text = self._undone.pop()
        self._done.append(text)
        return text

    def entries(self) -> list[str]:
        """Return the current entries, oldest first."""
        return list(self._done)


def _show(pad: Notepad) -> None:
    entries = pad.entries()
    if not entries:
        print("Nothing written yet.")
        return
    print("==== Current notes ====")
    for entry in entries:
        print(entry)
    print("=======================")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the note pad on standard input; no arguments are used."""
    pad = Notepad()
    print("Simple undo/redo note pad (commands: add, undo, redo, view, exit)")
    while True:
        try:
            line = input("Command: ")
        except EOFError:
            break
        if line.startswith("add "):
            try:
                pad.add(line[4:])
            except StackFullError as exc:
                print(f"Error: {exc}")
        elif line.startswith("undo"):
            text = pad.undo()
            print(f"Undo: {text}" if text is not None else "Nothing to undo.")
        elif line.startswith("redo"):
            text = pad.redo()
            print(f"Redo: {text}" if text is not None else "Nothing to redo.")
        elif line.startswith("view"):
            _show(pad)
        elif line.startswith("exit"):
            print("Bye.")
            break
        else:
            print("Unknown command. (add, undo, redo, view, exit)")
    return 0


if __name__ == "__main__":
    sys.exit(main())