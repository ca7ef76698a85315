"""
VIGNERE — Polyalphabetic Shift Cipher
=====================================
Each letter is shifted by the alphabet position of the key letter at the
same place, with the key repeated as often as needed:

    text   A T T A C K A T D A W N
    key    L E M O N L E M O N L E
    cipher L X F O P V E F R N H R

The key must already be pure uppercase letters. Spaces, lowercase or
punctuation in the key are rejected rather than silently cleaned, so both
peers are guaranteed to be walking the same key.

Historical note: Giovan Battista Bellaso, 1553, later misattributed to
Blaise de Vigenère. Broken by Kasiski in 1863.
"""

from ..alphabet import clean, index_of, shift_char
from ..errors import ConstructionError

FORWARD  = 1
BACKWARD = -1


class VignereCipher:
    """Vigenère cipher with a repeating key."""

    def __init__(self, key: str):
        if not key:
            raise ConstructionError("Key is null or empty")
        if clean(key) != key:
            raise ConstructionError("Key contains a non-ALPHABET character")
        self._key    = key
        self._shifts = tuple(index_of(c) for c in key)

    @property
    def key(self) -> str:
        return self._key

    def prepare(self, cleartext: str) -> str:
        return clean(cleartext)

    def encrypt(self, preptext: str) -> str:
        return self._shift_text(preptext, FORWARD)

    def decrypt(self, ciphertext: str) -> str:
        return self._shift_text(ciphertext, BACKWARD)

    def _shift_text(self, text: str, direction: int) -> str:
        if not text:
            return text
        period = len(self._shifts)
        return "".join(
            shift_char(c, direction * self._shifts[i % period])
            for i, c in enumerate(text)
        )
