"""
cryptology — Live Demo: RSA, Polybius, Vigenère, Caesar
=======================================================
Run:  python examples/demo_all_ciphers.py

Walks every cipher through the CipherEngine the way a front end would,
feeding raw field text and printing what comes back.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cryptology              import CipherEngine, CryptologyError, format_trace
from cryptology.ciphers.rsa  import RSACipher

LINE = "═" * 70


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    en = CipherEngine("EN")
    ua = CipherEngine("UA")

    # ── RSA ──────────────────────────────────────────────────────────────────
    header("RSA — textbook, p=61 q=53 e=17")
    params = en.rsa_compute("61", "53", "17", "")
    for line in params.describe().splitlines():
        ok(line)
    c = en.rsa_encrypt("61", "53", str(params.e), "65")
    ok("Encrypt", f"M={c.source} → C={c.value}")
    m = en.rsa_decrypt("61", "53", str(params.d), str(c.value))
    ok("Decrypt", f"C={m.source} → M={m.value}")
    wide = en.rsa_encrypt("61", "53", str(params.e), "3298")
    for note in wide.notes:
        ok(note)
    pem = RSACipher.from_primes(2 ** 61 - 1, 2 ** 89 - 1, e=65537).export_public_pem()
    ok("PEM export", pem.decode().splitlines()[0])

    # ── Polybius ─────────────────────────────────────────────────────────────
    header("POLYBIUS — 5×5 English, 6×6 Ukrainian")
    tokens = en.polybius("Hello, World", True)
    ok("EN encode", tokens)
    ok("EN decode", en.polybius(tokens, False))
    tokens = ua.polybius("Їжак", True)
    ok("UA encode", tokens)
    ok("UA decode", ua.polybius(tokens, False))

    # ── Vigenère ─────────────────────────────────────────────────────────────
    header("VIGENÈRE — key KEY, ROT 0 and ROT 3")
    ct = en.vigenere("Attack at dawn!", "KEY", True)
    ok("Encrypted", ct)
    ok("Decrypted", en.vigenere(ct, "KEY", False))
    ct = en.vigenere("Attack at dawn!", "KEY", True, rotation="3")
    ok("ROT 3", ct)
    print()
    for line in format_trace(en.vigenere_table("Hi, Bob", "KEY")).splitlines():
        print(f"     {line}")

    # ── Caesar ───────────────────────────────────────────────────────────────
    header("CAESAR — shift 3, malformed shift, Ukrainian")
    ok("EN +3", en.caesar("Hello, World!", "3", True))
    ok("EN 'x'", en.caesar("Hello, World!", "x", True))
    ct = ua.caesar("Слава Україні!", "5", True)
    ok("UA +5", ct)
    ok("UA -5", ua.caesar(ct, "5", False))

    # ── Errors ───────────────────────────────────────────────────────────────
    header("ERRORS — reported, not printed by the core")
    for label, call in [
        ("no exponent",   lambda: en.rsa_compute("61", "53")),
        ("bad pair",      lambda: en.rsa_compute("61", "53", "17", "18")),
        ("bad key",       lambda: en.vigenere("TEXT", "K3Y", True)),
    ]:
        try:
            call()
        except CryptologyError as exc:
            ok(label, f"{type(exc).__name__}: {exc}")

    print(f"\n{LINE}\n")
