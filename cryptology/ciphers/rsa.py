"""
RSA Engine — textbook RSA over arbitrary-precision integers
===========================================================
Key derivation from (p, q) and one known exponent, then raw
c = m^e mod N / m = c^d mod N. No padding, no blinding, no key generation:
this is the arithmetic you check by hand with p=61, q=53.

Policy for out-of-range input:
  A message or ciphertext >= N is not rejected. It is reduced modulo N,
  the reduction is reported through an OutOfRangeWarning on every call,
  and the reduced value is what gets transformed. Callers wanting strict validation should
  check 0 <= value < N before calling.

Interop:
  RSACipher.export_public_pem() hands the derived (e, N) to the
  `cryptography` library, so a toy key can be inspected with openssl.

Dependencies: cryptography >= 41.0
"""

import logging
import sys
import warnings
from dataclasses import dataclass
from typing import Optional, Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa as crypto_rsa

from ..arithmetic import mod_inverse, mod_pow
from ..errors import InconsistentKeyError, InvalidInputError, OutOfRangeWarning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyParameters:
    """The derived tuple (p, q, N, φ(N), e, d)."""

    p:   int
    q:   int
    n:   int
    phi: int
    e:   int
    d:   int

    @property
    def public_key(self) -> Tuple[int, int]:
        return self.e, self.n

    @property
    def private_key(self) -> Tuple[int, int]:
        return self.d, self.n

    def describe(self) -> str:
        return "\n".join([
            f"d = {self.d}", f"e = {self.e}", f"p = {self.p}", f"q = {self.q}",
            f"N = {self.n}", f"φ(N) = {self.phi}",
            f"Ek = ({self.e}, {self.n})", f"Dk = ({self.d}, {self.n})",
        ])


def derive_parameters(p: int, q: int,
                      e: Optional[int] = None,
                      d: Optional[int] = None) -> KeyParameters:
    """
    Compute N and φ(N) and fill in whichever exponent is missing.

    Raises:
        InvalidInputError    : p or q <= 1, or neither exponent supplied
        NoInverseError       : the known exponent shares a factor with φ(N)
        InconsistentKeyError : both supplied but e*d mod φ(N) != 1
    """
    if p <= 1 or q <= 1:
        raise InvalidInputError("p,q must be > 1")
    if e is None and d is None:
        raise InvalidInputError("Provide at least d or e")

    n   = p * q
    phi = (p - 1) * (q - 1)

    if e is None:
        e = mod_inverse(d % phi, phi)
        logger.debug("derived e = %d from d", e)
    elif d is None:
        d = mod_inverse(e % phi, phi)
        logger.debug("derived d = %d from e", d)
    elif (e * d) % phi != 1:
        raise InconsistentKeyError(
            "e and d are not modular inverses modulo φ(N)"
        )

    return KeyParameters(p=p, q=q, n=n, phi=phi, e=e, d=d)


def _report(warning: OutOfRangeWarning) -> None:
    # A fresh registry per call: every reduction is reported, while the
    # caller's filters (ignore, error) still apply.
    caller = sys._getframe(3)
    warnings.warn_explicit(
        warning, OutOfRangeWarning,
        caller.f_code.co_filename, caller.f_lineno,
        module=caller.f_globals.get("__name__", __name__),
        registry=None,
    )


def _normalize(value: int, n: int, label: str) -> int:
    if n <= 1:
        raise InvalidInputError("N must be > 1")
    if value < 0:
        raise InvalidInputError(f"{label} must be non-negative")
    if value >= n:
        reduced = value % n
        _report(OutOfRangeWarning(label, value, reduced, n))
        logger.debug("%s reduced modulo N: %d -> %d", label, value, reduced)
        return reduced
    return value


def encrypt(message: int, e: int, n: int) -> int:
    """C = M^e mod N, reducing M modulo N first (with a warning) if M >= N."""
    return mod_pow(_normalize(message, n, "M"), e, n)


def decrypt(ciphertext: int, d: int, n: int) -> int:
    """M = C^d mod N, reducing C modulo N first (with a warning) if C >= N."""
    return mod_pow(_normalize(ciphertext, n, "C"), d, n)


class RSACipher:
    """Textbook RSA bound to one set of derived key parameters."""

    def __init__(self, params: KeyParameters):
        self.params = params

    @classmethod
    def from_primes(cls, p: int, q: int,
                    e: Optional[int] = None,
                    d: Optional[int] = None) -> "RSACipher":
        return cls(derive_parameters(p, q, e=e, d=d))

    def encrypt(self, message: int) -> int:
        return encrypt(message, self.params.e, self.params.n)

    def decrypt(self, ciphertext: int) -> int:
        return decrypt(ciphertext, self.params.d, self.params.n)

    def crypto_public_key(self) -> crypto_rsa.RSAPublicKey:
        """(e, N) as a `cryptography` public key object."""
        numbers = crypto_rsa.RSAPublicNumbers(self.params.e, self.params.n)
        try:
            return numbers.public_key()
        except ValueError as exc:
            raise InvalidInputError(f"Key cannot be exported: {exc}") from exc

    def export_public_pem(self) -> bytes:
        return self.crypto_public_key().public_bytes(
            serialization.Encoding.PEM,
            serialization.PublicFormat.SubjectPublicKeyInfo
        )

    def __repr__(self):
        return f"RSACipher(N={self.params.n}, e={self.params.e})"
