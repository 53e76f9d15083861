"""
Vigenère Cipher — with alphabet rotation and a per-character trace
===================================================================
Classic polyalphabetic substitution. The key cursor only advances on
characters that belong to the alphabet; everything else passes through
and does not consume key material. Output case mirrors input case.

Rotation:
  A ROT field value rotates the alphabet by its negation, so ROT=1 over
  A..Z gives ZABC..Y; rotation_offset() applies that convention. The
  cipher itself never looks at the rotation.

Trace:
  vigenere_trace() replays encryption and records, per input character,
  the key letter consumed and the shift applied, so a student can check
  every step by hand.
"""

import logging
from typing import List, NamedTuple, Optional

from ..alphabets import EN_UP, Alphabet, is_upper, parse_int
from ..errors import InvalidKeyError

logger = logging.getLogger(__name__)

SKIPPED = "-"
TRACE_HEADER = ("#", "Orig", "Key", "Shift", "Enc")


class TraceRow(NamedTuple):
    index:     int
    original:  str
    key:       str
    shift:     Optional[int]
    encrypted: str

    def cells(self) -> tuple:
        shift = SKIPPED if self.shift is None else str(self.shift)
        return str(self.index), self.original, self.key, shift, self.encrypted


def rotation_offset(rot, n: int) -> int:
    """Alphabet rotation for a ROT field value: (-rot) mod n, 0 if malformed."""
    value = parse_int(rot)
    if value is None or n == 0:
        return 0
    return (-value) % n


def _checked_key(key: str, alphabet: Alphabet) -> str:
    if not key:
        raise InvalidKeyError("Key required")
    key_up = key.upper()
    if any(ch not in alphabet for ch in key_up):
        raise InvalidKeyError("Key contains invalid characters")
    return key_up


def _mirror_case(source: str, ch: str) -> str:
    return ch if is_upper(source) else ch.lower()


def vigenere(text: str, key: str, encrypt: bool,
             alphabet: Alphabet = EN_UP) -> str:
    alphabet = Alphabet(alphabet)
    key_up = _checked_key(key, alphabet)
    n = len(alphabet)

    out = []
    cursor = 0
    for ch in text:
        target = alphabet.index_of(ch.upper())
        if target is None:
            out.append(ch)
            continue
        shift = alphabet.index_of(key_up[cursor % len(key_up)])
        pos = (target + shift) % n if encrypt else (target - shift + n) % n
        out.append(_mirror_case(ch, alphabet[pos]))
        cursor += 1
    return "".join(out)


def vigenere_trace(text: str, key: str,
                   alphabet: Alphabet = EN_UP) -> List[TraceRow]:
    alphabet = Alphabet(alphabet)
    key_up = _checked_key(key, alphabet)
    n = len(alphabet)

    rows = []
    cursor = 0
    for i, ch in enumerate(text, start=1):
        target = alphabet.index_of(ch.upper())
        if target is None:
            rows.append(TraceRow(i, ch, SKIPPED, None, ch))
            continue
        kch = key_up[cursor % len(key_up)]
        shift = alphabet.index_of(kch)
        enc = alphabet[(target + shift) % n]
        rows.append(TraceRow(i, ch, _mirror_case(ch, kch), shift,
                             _mirror_case(ch, enc)))
        cursor += 1
    return rows


def format_trace(rows: List[TraceRow]) -> str:
    """Tab-separated table, header first, ready to paste into a spreadsheet."""
    lines = ["\t".join(TRACE_HEADER)]
    lines.extend("\t".join(row.cells()) for row in rows)
    return "\n".join(lines)


class VigenereCipher:
    """
    Vigenère cipher bound to a key and an (optionally rotated) alphabet.

    The key is validated here, once, against the rotated alphabet.
    Rotation never changes membership, only positions.
    """

    def __init__(self, key: str, alphabet: Alphabet = EN_UP, rotation=0):
        base = Alphabet(alphabet)
        self.offset   = rotation_offset(rotation, len(base))
        self.alphabet = base.rotate(self.offset)
        self._key     = _checked_key(key, self.alphabet)
        logger.debug("VigenereCipher n=%d ROT offset=%d", len(self.alphabet), self.offset)

    def encrypt(self, plaintext: str) -> str:
        return vigenere(plaintext, self._key, True, self.alphabet)

    def decrypt(self, ciphertext: str) -> str:
        return vigenere(ciphertext, self._key, False, self.alphabet)

    def trace(self, plaintext: str) -> List[TraceRow]:
        return vigenere_trace(plaintext, self._key, self.alphabet)
