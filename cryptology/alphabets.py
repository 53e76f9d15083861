"""
Alphabet Utilities
==================
An Alphabet is an ordered, duplicate-free run of characters that defines
the ring a cipher works in: 26 for English, 33 for Ukrainian, 25 or 36 for
the Polybius squares.

Also home to the two boundary rules every front end relies on:
  • integer literals  — optional leading minus, then one or more digits
  • letter case       — a character is upper-case iff it equals ch.upper()
"""

import re
from typing import Iterator, Optional, Union

from .errors import InvalidInputError

_INT_LITERAL = re.compile(r"^-?[0-9]+$")


class Alphabet:
    """Immutable ordered character set with O(1) position lookup."""

    __slots__ = ("_letters", "_positions")

    def __init__(self, letters: Union[str, "Alphabet"]):
        letters = str(letters)
        positions = {}
        for i, ch in enumerate(letters):
            if ch in positions:
                raise InvalidInputError(
                    f"Alphabet contains duplicate character {ch!r}."
                )
            positions[ch] = i
        self._letters   = letters
        self._positions = positions

    def index_of(self, ch: str) -> Optional[int]:
        """Canonical position of ch, or None. Case-sensitive."""
        return self._positions.get(ch)

    def rotate(self, amount: int) -> "Alphabet":
        """Cyclic left rotation; any integer amount, negatives included."""
        n = len(self._letters)
        if n == 0:
            return self
        r = amount % n
        return Alphabet(self._letters[r:] + self._letters[:r])

    def lower(self) -> "Alphabet":
        return Alphabet(self._letters.lower())

    def __len__(self) -> int:
        return len(self._letters)

    def __contains__(self, ch) -> bool:
        return ch in self._positions

    def __getitem__(self, i: int) -> str:
        return self._letters[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._letters)

    def __eq__(self, other) -> bool:
        if isinstance(other, Alphabet):
            return self._letters == other._letters
        if isinstance(other, str):
            return self._letters == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._letters)

    def __str__(self) -> str:
        return self._letters

    def __repr__(self) -> str:
        return f"Alphabet({self._letters!r})"


def rotate(alphabet: Alphabet, amount: int) -> Alphabet:
    return Alphabet(alphabet).rotate(amount)


def index_of(alphabet: Alphabet, ch: str) -> Optional[int]:
    return Alphabet(alphabet).index_of(ch)


def is_upper(ch: str) -> bool:
    return ch == ch.upper()


def parse_int(raw) -> Optional[int]:
    """
    Parse a UI field into an int, or None when it is blank or malformed.

    Ints pass straight through; bools and other types are treated as absent.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not _INT_LITERAL.match(text):
        return None
    return int(text)


def require_int(raw, name: str) -> int:
    value = parse_int(raw)
    if value is None:
        raise InvalidInputError(f"{name} must be integer")
    return value


# ── Built-in alphabets ──────────────────────────────────────────────────────
EN_UP = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
EN_LO = Alphabet("abcdefghijklmnopqrstuvwxyz")
UA_UP = Alphabet("АБВГҐДЕЄЖЗИІЇЙКЛМНОПРСТУФХЦЧШЩЬЮЯ")
UA_LO = Alphabet("абвгґдеєжзиіїйклмнопрстуфхцчшщьюя")

# I and J share a cell in the English square; digits pad the Ukrainian one to 6×6.
POLYBIUS_EN = Alphabet("ABCDEFGHIKLMNOPQRSTUVWXYZ")
POLYBIUS_UA = Alphabet(str(UA_UP) + "012")
