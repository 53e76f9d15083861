from .rsa      import KeyParameters, RSACipher, derive_parameters, encrypt, decrypt
from .caesar   import CaesarCipher, caesar, normalize_shift
from .vigenere import (TraceRow, VigenereCipher, format_trace, rotation_offset,
                       vigenere, vigenere_trace)
from .polybius import PolybiusSquare, build_maps, polybius_decode, polybius_encode
