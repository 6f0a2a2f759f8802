"""Type a word one character at a time and get completions from a dictionary."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from stacklab.notepad import StackFullError

MAX_INPUT = 100

DICTIONARY = (
    "apple", "banana", "grape", "orange", "melon",
    "apricot", "blueberry", "blackberry", "pear", "peach",
)


def is_prefix(prefix: str, word: str) -> bool:
    """Return True if ``word`` starts with ``prefix``, ignoring case."""
    if len(prefix) > len(word):
        return False
    return all(p.lower() == w.lower() for p, w in zip(prefix, word))


class Autocomplete:
    """Typed characters with undo and redo, and the words they can complete to."""

    def __init__(self, words: Iterable[str] = DICTIONARY, capacity: int = MAX_INPUT) -> None:
        self.words = tuple(words)
        self.capacity = capacity
        self._typed: list[str] = []
        self._undone: list[str] = []

    def type_char(self, ch: str) -> None:
        """Append one character; any undone characters are forgotten."""
        if len(ch) != 1:
            raise ValueError("exactly one character must be typed")
        if len(self._typed) >= self.capacity:
            raise StackFullError("the input is full")
        self._typed.append(ch)
        self._undone.clear()

    def undo(self) -> str | None:
        """Remove the last character and return it, or None if nothing is typed."""
        if not self._typed:
            return None
        ch = self._typed.pop()
        if len(self._undone) < self.capacity:
            self._undone.append(ch)
        return ch

    def redo(self) -> str | None:
        """Restore the last undone character and return it, or None."""
        if not self._undone:
            return None
        ch = self._undone.pop()
        if len(self._typed) < self.capacity:
            self._typed.append(ch)
        return ch

    def text(self) -> str:
        """Return what has been typed so far."""
        return "".join(self._typed)

    def suggestions(self) -> list[str]:
        """Return the dictionary words that start with the typed text, in order."""
        typed = self.text()
        if not typed:
            return []
        return [word for word in self.words if is_prefix(typed, word)]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the completer on standard input; no arguments are used."""
    completer = Autocomplete()
    print("Autocomplete started")
    print("Commands: a character | /u: undo | /r: redo | /q: quit")
    while True:
        try:
            command = input(f"Current input: '{completer.text()}' > ")
        except EOFError:
            break
        if not command:
            print("Empty input. Please try again.")
            continue
        if command.startswith("/"):
            if command == "/q":
                print("Bye.")
                break
            if command == "/u":
                if completer.undo() is None:
                    print("Cannot undo: nothing has been typed.")
            elif command == "/r":
                if completer.redo() is None:
                    print("Cannot redo: nothing has been undone.")
            else:
                print("Unknown command.")
        elif len(command) == 1:
            try:
                completer.type_char(command)
            except StackFullError:
                print("The input is full.")
        else:
            print("Invalid input. Commands start with '/'; otherwise type one character.")

        if not completer.text():
            print("Suggestions: none")
        else:
            words = completer.suggestions()
            print("Suggestions: " + (" ".join(words) if words else "none"))
    return 0


if __name__ == "__main__":
    sys.exit(main())