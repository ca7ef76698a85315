"""
clack_cipher — Clack chat cipher subsystem
==========================================
Negotiable character ciphers for a teaching chat system.
From Caesar (~50 BC) to a keyed pseudo one-time pad.

Ciphers:
    NULL_CIPHER          — identity, the default
    CAESAR_CIPHER        — fixed shift
    VIGNERE_CIPHER       — repeating-key shift
    PLAYFAIR_CIPHER      — 5×5 digram substitution
    PSEUDO_ONE_TIME_PAD  — keyed ChaCha20 keystream shift

CipherManager holds a session's settings (enabled, cipher, key), swaps
ciphers validate-then-commit, and answers OPTION commands.

Not a production cryptographic library: these ciphers are for learning
and do not resist real cryptanalysis.
"""

__version__ = "1.0.0"
__project__ = "Clack"

from .alphabet import ALPHABET, clean, group, mod, shift, shift_char
from .ciphers  import (
    CaesarCipher, CipherKind, NullCipher, PlayfairCipher,
    PseudoOneTimePad, VignereCipher, build_cipher,
)
from .errors   import (
    CipherError, ConstructionError, InvalidInputError,
    UnknownCipherNameError, UnknownOptionError,
)
from .keystream import KeystreamGenerator, derive_seed
from .manager  import CipherConfig, CipherManager
from .options  import OptionCommand, OptionTarget

__all__ = [
    "ALPHABET",
    "clean",
    "group",
    "mod",
    "shift",
    "shift_char",
    "CipherKind",
    "build_cipher",
    "NullCipher",
    "CaesarCipher",
    "VignereCipher",
    "PlayfairCipher",
    "PseudoOneTimePad",
    "KeystreamGenerator",
    "derive_seed",
    "CipherConfig",
    "CipherManager",
    "OptionCommand",
    "OptionTarget",
    "CipherError",
    "ConstructionError",
    "InvalidInputError",
    "UnknownCipherNameError",
    "UnknownOptionError",
]
