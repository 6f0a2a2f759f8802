"""A bounded chat log that drops its oldest message when it overflows."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence

MAX_MESSAGES = 10
MAX_LENGTH = 100


class MessageQueue:
    """Messages kept in arrival order, at most ``capacity`` of them."""

    def __init__(self, capacity: int = MAX_MESSAGES) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._messages: deque[str] = deque()

    def send(self, message: str) -> str | None:
        """Add a message; return the oldest message dropped to make room, if any."""
        dropped = self._messages.popleft() if len(self._messages) >= self.capacity else None
        self._messages.append(message)
        return dropped

    def delete(self) -> str | None:
        """Remove and return the oldest message, or None if there is none."""
        return self._messages.popleft() if self._messages else None

    def messages(self) -> list[str]:
        """Return the messages, oldest first."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chat log on standard input; no arguments are used."""
    queue = MessageQueue()
    print("=== Chat message manager ===")
    print("Commands: send / view / delete / exit")
    while True:
        try:
            words = input("\n> Command: ").split()
        except EOFError:
            break
        command = words[0] if words else ""
        if command == "send":
            try:
                message = input("Message: ")[: MAX_LENGTH - 1]
            except EOFError:
                break
            dropped = queue.send(message)
            if dropped is not None:
                print(f"[Dropped] Too many messages, removed the oldest: {dropped}")
            print(f"[Added] {message}")
        elif command == "view":
            messages = queue.messages()
            if not messages:
                print("[No messages]")
            else:
                print("\n[Chat messages] (oldest first)")
                for number, message in enumerate(messages, start=1):
                    print(f"{number}: {message}")
        elif command == "delete":
            removed = queue.delete()
            print(f"[Deleted] {removed}" if removed is not None else "No message to delete.")
        elif command == "exit":
            print("Bye.")
            break
        else:
            print("Unknown command. Try again.")
    return 0


if __name__ == "__main__":
    sys.exit(main())