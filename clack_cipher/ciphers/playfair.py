"""
PLAYFAIR — 5×5 Digram Substitution
==================================
Encrypts letters two at a time using a 5×5 square built from the key.

Matrix construction:
    clean the key, merge J into I, append the alphabet, keep only the
    first occurrence of each letter, and write the first 25 letters into
    the square row by row. An empty key gives the plain alphabet.

For each digram (a, b) at (r0, c0), (r1, c1):
    same row      → take the letter one column right (left to decrypt)
    same column   → take the letter one row down (up to decrypt)
    otherwise     → swap columns, each letter keeps its own row

The rectangle rule is its own inverse. Identical digrams have no
defined substitution, so prepare() splits them with a filler and pads
odd-length text; encrypt()/decrypt() refuse anything prepare() would
never have produced.

This departs from the classic rule in two places: a doubled X is split
with Q rather than X, and a dangling Z is padded with X rather than Z.
The classic rule turns "XX" into XX XZ and "Z" into ZZ, both of which
contain a digram that cannot be encrypted.

Historical note: Charles Wheatstone, 1854, promoted by Lord Playfair.
Used tactically by the British in the Boer War and WWI.
"""

from typing import Dict, Tuple

from ..alphabet import ALPHABET, clean, mod
from ..config import (
    PLAYFAIR_FILLER, PLAYFAIR_FILLER_ALT,
    PLAYFAIR_PAD, PLAYFAIR_PAD_ALT, PLAYFAIR_SIZE,
)
from ..errors import ConstructionError, InvalidInputError

ENCRYPT = 1
DECRYPT = -1


class PlayfairCipher:
    """Playfair cipher over a key-derived 5×5 matrix (I and J merged)."""

    def __init__(self, key: str):
        if key is None:
            raise ConstructionError("Key cannot be null")
        letters = (clean(key) + ALPHABET).replace("J", "I")
        # dict preserves insertion order: first occurrence wins
        unique = "".join(dict.fromkeys(letters))[:PLAYFAIR_SIZE ** 2]
        self._matrix: Tuple[Tuple[str, ...], ...] = tuple(
            tuple(unique[row * PLAYFAIR_SIZE:(row + 1) * PLAYFAIR_SIZE])
            for row in range(PLAYFAIR_SIZE)
        )
        self._positions: Dict[str, Tuple[int, int]] = {
            c: divmod(i, PLAYFAIR_SIZE) for i, c in enumerate(unique)
        }

    @property
    def matrix(self) -> Tuple[Tuple[str, ...], ...]:
        return self._matrix

    def prepare(self, cleartext: str) -> str:
        """
        Clean, merge J into I, split identical digrams with a filler, and
        pad to even length.

        The filler is X, or Q when the doubled letter is itself X. The pad
        is Z, or X when the dangling letter is itself Z.
        """
        if not cleartext:
            return cleartext
        text = clean(cleartext).replace("J", "I")
        out = []
        i = 0
        while i < len(text):
            first = text[i]
            out.append(first)
            if i + 1 < len(text) and text[i + 1] == first:
                out.append(PLAYFAIR_FILLER_ALT if first == PLAYFAIR_FILLER
                           else PLAYFAIR_FILLER)
                i += 1
            elif i + 1 < len(text):
                out.append(text[i + 1])
                i += 2
            else:
                i += 1
        if len(out) % 2 == 1:
            out.append(PLAYFAIR_PAD_ALT if out[-1] == PLAYFAIR_PAD
                       else PLAYFAIR_PAD)
        return "".join(out)

    def encrypt(self, preptext: str) -> str:
        return self._transform(preptext, ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        return self._transform(ciphertext, DECRYPT)

    def _locate(self, c: str) -> Tuple[int, int]:
        try:
            return self._positions[c]
        except KeyError:
            raise InvalidInputError(
                f"Argument ('{c}') not in Playfair matrix") from None

    def _transform(self, text: str, delta: int) -> str:
        if not text:
            return text
        if len(text) % 2 == 1:
            raise InvalidInputError("Odd-length text, cannot encrypt/decrypt")
        m = self._matrix
        out = []
        for i in range(0, len(text), 2):
            c0, c1 = text[i], text[i + 1]
            if c0 == c1:
                raise InvalidInputError(
                    "Same-letter digraph, cannot encrypt/decrypt")
            r0, k0 = self._locate(c0)
            r1, k1 = self._locate(c1)
            if r0 == r1:
                out.append(m[r0][mod(k0 + delta, PLAYFAIR_SIZE)])
                out.append(m[r1][mod(k1 + delta, PLAYFAIR_SIZE)])
            elif k0 == k1:
                out.append(m[mod(r0 + delta, PLAYFAIR_SIZE)][k0])
                out.append(m[mod(r1 + delta, PLAYFAIR_SIZE)][k1])
            else:
                out.append(m[r0][k1])
                out.append(m[r1][k0])
        return "".join(out)
