"""
cryptology — educational cipher toolkit
=======================================
Four textbook transforms behind one small, pure computational core.

Ciphers:
    RSA       — exact big-integer key derivation, encrypt, decrypt
    POLYBIUS  — 5×5 (English, I/J merged) and 6×6 (Ukrainian) squares
    VIGENÈRE  — polyalphabetic, with alphabet rotation and a step trace
    CAESAR    — fixed shift over parallel upper/lower case classes

Front ends talk to CipherEngine; everything else is plain functions and
immutable values that can be called directly.

Not a cryptosystem: no secure key generation, no padding, no side-channel
resistance.
"""

__version__  = "1.0.0"

from .errors              import (CryptologyError, InvalidInputError, NoInverseError,
                                  InconsistentKeyError, InvalidKeyError,
                                  OutOfRangeWarning)
from .arithmetic          import extended_gcd, mod_inverse, mod_pow
from .alphabets           import (Alphabet, rotate, index_of, parse_int, require_int,
                                  EN_UP, EN_LO, UA_UP, UA_LO,
                                  POLYBIUS_EN, POLYBIUS_UA)
from .ciphers.rsa         import KeyParameters, RSACipher, derive_parameters
from .ciphers.caesar      import CaesarCipher, caesar
from .ciphers.vigenere    import (VigenereCipher, TraceRow, vigenere,
                                  vigenere_trace, format_trace)
from .ciphers.polybius    import (PolybiusSquare, build_maps, polybius_encode,
                                  polybius_decode)
from .engine              import CipherEngine, RSAResult

__all__ = [
    "CryptologyError",
    "InvalidInputError",
    "NoInverseError",
    "InconsistentKeyError",
    "InvalidKeyError",
    "OutOfRangeWarning",
    "extended_gcd",
    "mod_inverse",
    "mod_pow",
    "Alphabet",
    "rotate",
    "index_of",
    "parse_int",
    "require_int",
    "EN_UP",
    "EN_LO",
    "UA_UP",
    "UA_LO",
    "POLYBIUS_EN",
    "POLYBIUS_UA",
    "KeyParameters",
    "RSACipher",
    "derive_parameters",
    "CaesarCipher",
    "caesar",
    "VigenereCipher",
    "TraceRow",
    "vigenere",
    "vigenere_trace",
    "format_trace",
    "PolybiusSquare",
    "build_maps",
    "polybius_encode",
    "polybius_decode",
    "CipherEngine",
    "RSAResult",
]
