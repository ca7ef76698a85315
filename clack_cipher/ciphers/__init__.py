"""
Cipher kinds and the single constructor that dispatches over them.

Every cipher offers the same three operations, in this order:

    prepare(cleartext)  → preptext     sanitise arbitrary text
    encrypt(preptext)   → ciphertext
    decrypt(ciphertext) → preptext

and guarantees decrypt(encrypt(x)) == x for any x returned by prepare().
"""

import logging
from enum import Enum
from typing import List, Union

from ..errors import UnknownCipherNameError
from .caesar import CaesarCipher
from .null import NullCipher
from .one_time_pad import PseudoOneTimePad
from .playfair import PlayfairCipher
from .vignere import VignereCipher

logger = logging.getLogger(__name__)

CharacterCipher = Union[
    NullCipher, CaesarCipher, VignereCipher, PlayfairCipher, PseudoOneTimePad
]


class CipherKind(Enum):
    """Every cipher a session can switch to."""

    CAESAR_CIPHER       = "CAESAR_CIPHER"
    NULL_CIPHER         = "NULL_CIPHER"
    PLAYFAIR_CIPHER     = "PLAYFAIR_CIPHER"
    PSEUDO_ONE_TIME_PAD = "PSEUDO_ONE_TIME_PAD"
    VIGNERE_CIPHER      = "VIGNERE_CIPHER"

    def __str__(self):
        return self.name

    @classmethod
    def parse(cls, name: Union[str, "CipherKind"]) -> "CipherKind":
        """Look up a kind by name, ignoring case."""
        if isinstance(name, cls):
            return name
        if name is None:
            raise UnknownCipherNameError("cipher name is null")
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnknownCipherNameError(
                f"'{name}' is not a known cipher "
                f"(choose from {', '.join(cls.names())})") from None

    @classmethod
    def names(cls) -> List[str]:
        return [kind.name for kind in cls]


_CONSTRUCTORS = {
    CipherKind.CAESAR_CIPHER:       CaesarCipher,
    CipherKind.NULL_CIPHER:         NullCipher,
    CipherKind.PLAYFAIR_CIPHER:     PlayfairCipher,
    CipherKind.PSEUDO_ONE_TIME_PAD: PseudoOneTimePad,
    CipherKind.VIGNERE_CIPHER:      VignereCipher,
}


def build_cipher(kind: Union[str, CipherKind], key) -> CharacterCipher:
    """
    Construct a fresh cipher of the given kind from key.
    Raises ConstructionError (or a subclass) if the pair is invalid.
    """
    kind = CipherKind.parse(kind)
    cipher = _CONSTRUCTORS[kind](key)
    logger.debug(f"Built {kind.name}")
    return cipher


__all__ = [
    "CipherKind",
    "CharacterCipher",
    "build_cipher",
    "NullCipher",
    "CaesarCipher",
    "VignereCipher",
    "PlayfairCipher",
    "PseudoOneTimePad",
]
