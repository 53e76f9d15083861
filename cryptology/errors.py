"""
Errors & warnings
=================
Every failure leaves the core as one of these types. Nothing here prints,
pops dialogs or logs: the caller decides how to surface the message.

    InvalidInputError    — malformed or missing integer / string field
    NoInverseError       — gcd(a, m) != 1 when an inverse was requested
    InconsistentKeyError — supplied e and d are not inverses modulo φ(N)
    InvalidKeyError      — Vigenère key empty or outside the alphabet
    OutOfRangeWarning    — RSA input >= N, reduced and reported (non-fatal)
"""


class CryptologyError(Exception):
    """Base class for every error raised by the toolkit."""


class InvalidInputError(CryptologyError, ValueError):
    pass


class NoInverseError(CryptologyError, ArithmeticError):
    pass


class InconsistentKeyError(CryptologyError, ValueError):
    pass


class InvalidKeyError(InvalidInputError):
    pass


class OutOfRangeWarning(UserWarning):
    """
    Issued when an RSA message or ciphertext is not below N.

    The value is reduced modulo N and the operation continues; the warning
    records exactly which value was transformed instead.
    """

    def __init__(self, label: str, original: int, reduced: int, modulus: int):
        self.label    = label
        self.original = original
        self.reduced  = reduced
        self.modulus  = modulus
        super().__init__(
            f"{label} normalized modulo N ({original} → {reduced})"
        )
