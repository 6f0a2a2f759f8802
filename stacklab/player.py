"""A music player that moves back and forth through the songs it has played."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MAX_HISTORY = 100

_HELP = """
Commands:
  play <title>  - play a new song
  prev          - play the previous song
  next          - play the next song
  list          - show the previous and next songs
  exit          - quit
------------------------------"""


class Player:
    """The current song plus stacks of previous and next songs.

    A stack that is full silently drops a song pushed onto it.
    """

    def __init__(self, capacity: int = MAX_HISTORY) -> None:
        self.capacity = capacity
        self.current = ""
        self._previous: list[str] = []
        self._next: list[str] = []

    def _push(self, stack: list[str], title: str) -> None:
        if len(stack) < self.capacity:
            stack.append(title)

    def play(self, title: str) -> None:
        """Play a new song; the song playing so far goes to the history."""
        if self.current:
            self._push(self._previous, self.current)
        self.current = title
        self._next.clear()

    def previous(self) -> str | None:
        """Go back one song and return it, or None if there is no earlier song."""
        if not self._previous:
            return None
        self._push(self._next, self.current)
        self.current = self._previous.pop()
        return self.current

    def next(self) -> str | None:
        """Go forward one song and return it, or None if there is no later song."""
        if not self._next:
            return None
        self._push(self._previous, self.current)
        self.current = self._next.pop()
        return self.current

    def history(self) -> list[str]:
        """Return the previous songs, most recent first."""
        return list(reversed(self._previous))

    def upcoming(self) -> list[str]:
        """Return the songs that ``next`` would reach, nearest first."""
        return list(reversed(self._next))


def _show(name: str, titles: list[str]) -> None:
    print(f"\n-- {name} (newest first) --")
    if not titles:
        print("   (empty)")
        return
    for title in titles:
        print(f"   -> {title}")


def _read_title(rest: str) -> str | None:
    title = rest.strip()
    while not title:
        try:
            title = input().strip()
        except EOFError:
            return None
    return title


def main(argv: Sequence[str] | None = None) -> int:
    """Run the player on standard input; no arguments are used."""
    player = Player()
    print("Music player started")
    print(_HELP)
    while True:
        print(f"\nNow playing: {player.current or '(none)'}")
        try:
            line = input("Command >> ")
        except EOFError:
            break
        parts = line.split(None, 1)
        if not parts:
            continue
        command = parts[0]
        if command == "play":
            title = _read_title(parts[1] if len(parts) > 1 else "")
            if title is None:
                break
            player.play(title)
            print(f"Playing: {player.current}")
        elif command == "prev":
            title = player.previous()
            print(f"Previous song: {title}" if title is not None else "No previous song.")
        elif command == "next":
            title = player.next()
            print(f"Next song: {title}" if title is not None else "No next song.")
        elif command == "list":
            _show("Previous songs", player.history())
            _show("Next songs", player.upcoming())
        elif command == "exit":
            print("Bye.")
            break
        else:
            print("Unknown command. Try again.")
            print(_HELP)
    return 0


if __name__ == "__main__":
    sys.exit(main())