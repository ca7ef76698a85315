"""
CAESAR — Fixed Shift Cipher
===========================
Every letter moves the same number of places along the alphabet.

The shift comes either from an integer (taken modulo 26) or from the
first character of a string key, so "B" shifts by 1 and "Z" by 25.
The string key is used exactly as given: its first character must
already be an uppercase letter.

Historical note: used by Julius Caesar with a shift of 3. Broken by
trying all 25 shifts, which is why it is the first cipher anyone learns.
"""

from typing import Union

from ..alphabet import ALPHABET, clean, shift
from ..errors import ConstructionError


class CaesarCipher:
    """Caesar cipher with a fixed shift."""

    def __init__(self, key: Union[int, str]):
        if isinstance(key, int):
            self._shift = key % len(ALPHABET)
            return
        if not key:
            raise ConstructionError("Need a non-null, non-empty string")
        first = key[0]
        if first not in ALPHABET:
            raise ConstructionError(
                "First character of 'key' argument not in ALPHABET")
        self._shift = ALPHABET.index(first)

    @property
    def offset(self) -> int:
        return self._shift

    def prepare(self, cleartext: str) -> str:
        return clean(cleartext)

    def encrypt(self, preptext: str) -> str:
        return shift(preptext, self._shift)

    def decrypt(self, ciphertext: str) -> str:
        return shift(ciphertext, -self._shift)
