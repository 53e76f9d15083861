"""
BigInt Arithmetic
=================
Extended Euclid, modular inverse and square-and-multiply exponentiation
over Python's arbitrary-precision integers.

Exponents and moduli routinely exceed a machine word here, so every
multiplication is followed by a reduction and nothing recurses on the
size of the operands.
"""

import logging
from typing import Tuple

from .errors import InvalidInputError, NoInverseError

logger = logging.getLogger(__name__)


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Return (g, x, y) with g = gcd(a, b) = a*x + b*y.

    Iterative form of the textbook recursion; b == 0 gives (a, 1, 0).
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """Return x in [0, m) with a*x ≡ 1 (mod m)."""
    if m <= 0:
        raise InvalidInputError("Modulus must be positive.")
    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise NoInverseError(f"No modular inverse (gcd({a}, {m}) = {g}).")
    return x % m


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Compute base**exponent mod modulus by right-to-left square-and-multiply.

    The base is reduced into [0, modulus) first, so negative bases work.
    """
    if exponent < 0:
        raise InvalidInputError("Exponent must be non-negative.")
    if modulus <= 0:
        raise InvalidInputError("Modulus must be positive.")

    result = 1 % modulus
    b = base % modulus
    e = exponent
    while e > 0:
        if e & 1:
            result = (result * b) % modulus
        b = (b * b) % modulus
        e >>= 1
    return result
