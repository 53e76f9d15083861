"""
Polybius Square
===============
Letters laid out row-major on a 5×5 (25 characters) or 6×6 grid; each
letter becomes its 1-based "row column" pair, so H on the English square
is "23".

Encoding upper-cases the input and joins tokens with single spaces.
Decoding splits on any whitespace and concatenates. Characters with no
cell pass through both ways.
"""

import logging
import re
from typing import Dict, List, Tuple

from ..alphabets import POLYBIUS_EN, Alphabet

logger = logging.getLogger(__name__)

_SPACE_RUN = re.compile(r" {2,}")


def _dedupe(letters: str) -> str:
    return "".join(dict.fromkeys(letters))


def build_maps(alphabet) -> Tuple[Dict[str, str], Dict[str, str]]:
    """Return (char -> token, token -> char). 25 letters give 5×5, else 6×6."""
    letters = _dedupe(str(alphabet))
    size = 5 if len(letters) == 25 else 6
    logger.debug("Polybius grid %dx%d for %d characters", size, size, len(letters))

    encode_map, decode_map = {}, {}
    for k, ch in enumerate(letters):
        row, col = divmod(k, size)
        token = f"{row + 1}{col + 1}"
        encode_map[ch] = token
        decode_map[token] = ch
    return encode_map, decode_map


def polybius_encode(text: str, encode_map: Dict[str, str]) -> str:
    pieces = [encode_map.get(ch.upper(), ch) for ch in text]
    return _SPACE_RUN.sub(" ", " ".join(pieces))


def polybius_decode(tokens: str, decode_map: Dict[str, str]) -> str:
    return "".join(decode_map.get(t, t) for t in tokens.split())


class PolybiusSquare:
    """Polybius square over a fixed alphabet."""

    def __init__(self, alphabet=POLYBIUS_EN):
        self.alphabet = Alphabet(_dedupe(str(alphabet)))
        self._encode, self._decode = build_maps(self.alphabet)
        self.size = 5 if len(self.alphabet) == 25 else 6

    def encode(self, text: str) -> str:
        return polybius_encode(text, self._encode)

    def decode(self, tokens: str) -> str:
        return polybius_decode(tokens, self._decode)

    def grid(self) -> List[str]:
        """Rows of the square, top to bottom."""
        letters = str(self.alphabet)
        return [letters[i:i + self.size]
                for i in range(0, len(letters), self.size)]
