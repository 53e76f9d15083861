"""
Caesar Cipher
=============
Fixed shift over one or more parallel case classes (upper / lower of the
same script). A character found in a class moves within that class; any
other character is copied unchanged.

The shift is deliberately forgiving: malformed numeric input becomes 0
instead of an error, and decryption is just encryption with -shift.
"""

import logging
import math
from typing import Sequence

from ..alphabets import EN_LO, EN_UP, Alphabet, parse_int
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


def normalize_shift(shift, n: int) -> int:
    """Reduce any shift value into [0, n); unusable input yields 0."""
    if n <= 0:
        return 0
    if isinstance(shift, float):
        s = math.trunc(shift) if math.isfinite(shift) else 0
    else:
        s = parse_int(shift)
        if s is None:
            s = 0
    return s % n


def _case_classes(alphabets: Sequence) -> list:
    classes = [Alphabet(a) for a in alphabets]
    if not classes:
        raise InvalidInputError("At least one alphabet is required.")
    if len({len(a) for a in classes}) != 1:
        raise InvalidInputError("Case-class alphabets must have equal length.")
    return classes


def caesar(text: str, shift, alphabets: Sequence = (EN_UP, EN_LO)) -> str:
    classes = _case_classes(alphabets)
    n = len(classes[0])
    s = normalize_shift(shift, n)

    out = []
    for ch in text:
        for alpha in classes:
            pos = alpha.index_of(ch)
            if pos is not None:
                out.append(alpha[(pos + s) % n])
                break
        else:
            out.append(ch)
    return "".join(out)


class CaesarCipher:
    """Caesar shift bound to a shift and a set of case classes."""

    def __init__(self, shift, alphabets: Sequence = (EN_UP, EN_LO)):
        self.alphabets = _case_classes(alphabets)
        self.shift     = normalize_shift(shift, len(self.alphabets[0]))
        logger.debug("CaesarCipher shift=%d n=%d", self.shift, len(self.alphabets[0]))

    def encrypt(self, plaintext: str) -> str:
        return caesar(plaintext, self.shift, self.alphabets)

    def decrypt(self, ciphertext: str) -> str:
        return caesar(ciphertext, -self.shift, self.alphabets)
