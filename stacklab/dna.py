"""Check that a DNA sequence folds into matching base pairs."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

_PAIRS = frozenset({("A", "T"), ("T", "A"), ("G", "C"), ("C", "G")})


class OddLengthError(ValueError):
    """Raised when a sequence has an odd length and cannot pair up."""


@dataclass(frozen=True)
class Mismatch:
    """A base from the first half that does not pair with its partner."""

    stacked: str
    current: str
    position: int  # 1-based index of ``current`` in the sequence


def is_pair(a: str, b: str) -> bool:
    """Return True if the two bases form a Watson-Crick pair."""
    return (a, b) in _PAIRS


def find_mismatch(dna: str) -> Mismatch | None:
    """Return the first mismatching pair, or None if every pair matches.

    The first half is matched in reverse against the second half.
    """
    if len(dna) % 2:
        raise OddLengthError("the sequence has an odd length")
    half = len(dna) // 2
    stack = list(dna[:half])
    for position, current in enumerate(dna[half:], start=half + 1):
        stacked = stack.pop()
        if not is_pair(stacked, current):
            return Mismatch(stacked, current, position)
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Check a sequence given as an argument or read from input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        dna = args[0]
    else:
        try:
            words = input("DNA sequence (e.g. ATGCAT): ").split()
        except EOFError:
            words = []
        dna = words[0] if words else ""
    try:
        mismatch = find_mismatch(dna)
    except OddLengthError:
        print("The sequence has an odd length; the pairs are incomplete.")
        return 1
    if mismatch is None:
        print("All base pairs match!")
    else:
        print(
            f"Mismatched pair: {mismatch.stacked} - {mismatch.current} "
            f"(character {mismatch.position} of the sequence)"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())