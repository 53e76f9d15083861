"""
CipherEngine — one facade for every front end
=============================================
Front ends (web page, desktop window, console) hand over raw field text;
the engine parses it with the toolkit's boundary rules, runs the cipher,
and returns typed results. Errors propagate as CryptologyError subclasses
for the front end to display.

Field policies:
  p, q, M, C     — must be integer literals (InvalidInputError otherwise)
  e, d           — blank or malformed means "not supplied"
  shift, ROT     — blank or malformed means 0
"""

import logging
import warnings
from dataclasses import dataclass, field
from typing import List

from .alphabets import (EN_LO, EN_UP, POLYBIUS_EN, POLYBIUS_UA, UA_LO, UA_UP,
                        parse_int, require_int)
from .ciphers import rsa as _rsa
from .ciphers.caesar import CaesarCipher
from .ciphers.polybius import PolybiusSquare
from .ciphers.vigenere import TraceRow, VigenereCipher
from .errors import InvalidInputError, OutOfRangeWarning

logger = logging.getLogger(__name__)


@dataclass
class RSAResult:
    """Outcome of an RSA encrypt/decrypt; source is the value actually used."""

    operation: str
    source:    int
    value:     int
    notes:     List[str] = field(default_factory=list)


class CipherEngine:
    """All four ciphers for one language ("EN" or "UA")."""

    LANGUAGES = {
        "EN": (EN_UP, EN_LO, POLYBIUS_EN),
        "UA": (UA_UP, UA_LO, POLYBIUS_UA),
    }

    def __init__(self, language: str = "EN"):
        code = str(language).strip().upper()
        if code not in self.LANGUAGES:
            raise InvalidInputError(
                f"Unsupported language {language!r}; choose one of "
                f"{', '.join(self.LANGUAGES)}."
            )
        self.language = code
        self.upper, self.lower, poly = self.LANGUAGES[code]
        self._square = PolybiusSquare(poly)

    # ── RSA ──────────────────────────────────────────────────────────────────
    def rsa_compute(self, p, q, e=None, d=None) -> _rsa.KeyParameters:
        params = _rsa.derive_parameters(
            require_int(p, "p"), require_int(q, "q"),
            e=parse_int(e), d=parse_int(d),
        )
        logger.info("Computed RSA parameters")
        return params

    def rsa_encrypt(self, p, q, e, message) -> RSAResult:
        n = require_int(p, "p") * require_int(q, "q")
        exponent = parse_int(e)
        if exponent is None:
            raise InvalidInputError("e is required or compute first")
        m = require_int(message, "M")
        result = self._run_rsa("encrypt", _rsa.encrypt, m, exponent, n)
        logger.info(f"Encryption done. C={result.value}")
        return result

    def rsa_decrypt(self, p, q, d, ciphertext) -> RSAResult:
        n = require_int(p, "p") * require_int(q, "q")
        exponent = parse_int(d)
        if exponent is None:
            raise InvalidInputError("d is required or compute first")
        c = require_int(ciphertext, "C")
        result = self._run_rsa("decrypt", _rsa.decrypt, c, exponent, n)
        logger.info(f"Decryption done. M={result.value}")
        return result

    @staticmethod
    def _run_rsa(operation, func, source: int, exponent: int, n: int) -> RSAResult:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", OutOfRangeWarning)
            value = func(source, exponent, n)

        notes = []
        used = source
        for w in caught:
            if isinstance(w.message, OutOfRangeWarning):
                used = w.message.reduced
                notes.append(f"Note: {w.message}")
                logger.info(f"Note: {w.message}")
            else:
                warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)
        return RSAResult(operation=operation, source=used, value=value, notes=notes)

    # ── Polybius ─────────────────────────────────────────────────────────────
    def polybius(self, text: str, encrypt: bool) -> str:
        result = (self._square.encode(text) if encrypt
                  else self._square.decode(text))
        logger.info("Done Polybius.")
        return result

    # ── Vigenère ─────────────────────────────────────────────────────────────
    def _vigenere(self, key: str, rotation) -> VigenereCipher:
        key = "" if key is None else str(key).strip()
        return VigenereCipher(key, self.upper, rotation=rotation)

    def vigenere(self, text: str, key: str, encrypt: bool, rotation="0") -> str:
        cipher = self._vigenere(key, rotation)
        result = cipher.encrypt(text) if encrypt else cipher.decrypt(text)
        logger.info("Vigenère done")
        return result

    def vigenere_table(self, text: str, key: str, rotation="0") -> List[TraceRow]:
        cipher = self._vigenere(key, rotation)
        rows = cipher.trace(text)
        logger.info(f"Table generated (ROT={cipher.offset}) with {len(rows)} rows")
        return rows

    # ── Caesar ───────────────────────────────────────────────────────────────
    def caesar(self, text: str, shift, encrypt: bool) -> str:
        cipher = CaesarCipher(shift, (self.upper, self.lower))
        result = cipher.encrypt(text) if encrypt else cipher.decrypt(text)
        logger.info("Caesar done")
        return result

    def __repr__(self):
        return f"CipherEngine({self.language!r})"


__all__ = ["CipherEngine", "RSAResult"]
