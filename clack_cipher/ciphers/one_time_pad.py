"""
PSEUDO ONE-TIME PAD — Keyed Keystream Shift
===========================================
Each letter is shifted by a fresh value drawn from a keystream generator
seeded from the key. With a truly random pad used once this would be a
real one-time pad; here the pad is pseudo-random and reproducible from
the key, which is what lets two peers that never exchange state stay in
step.

Keys:
    int  — used directly as the 64-bit seed (negative values wrap)
    str  — any phrase; see keystream.derive_seed(). Phrases of at least
           32 characters use the full seed width.

Synchronisation:
    Every encrypted character on one side must be matched by exactly one
    decrypted character on the other, in the same order. There is no
    recovery after a mismatch. Input is checked before any draw, so a
    rejected string does not consume the pad.

Not safe for concurrent use: interleaved calls from several threads
corrupt the draw order.
"""

import logging
from typing import Union

from ..alphabet import ALPHABET, clean, shift_char
from ..errors import ConstructionError, InvalidInputError
from ..keystream import MASK_64, KeystreamGenerator, derive_seed

logger = logging.getLogger(__name__)

ENCRYPT = 1
DECRYPT = -1


class PseudoOneTimePad:
    """Shift cipher driven by a deterministic keystream."""

    def __init__(self, key: Union[int, str]):
        if key is None:
            raise ConstructionError("null not allowed for key")
        if isinstance(key, int):
            seed = key & MASK_64
        else:
            seed = derive_seed(key)
        # Seed first, before anything else touches the generator.
        self._prng = KeystreamGenerator(seed)
        logger.debug(f"PseudoOneTimePad ready | key_type={type(key).__name__}")

    def prepare(self, cleartext: str) -> str:
        return clean(cleartext)

    def encrypt(self, preptext: str) -> str:
        return self._transform(preptext, ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        return self._transform(ciphertext, DECRYPT)

    def _transform(self, text: str, direction: int) -> str:
        if not text:
            return text
        for c in text:
            if c not in ALPHABET:
                raise InvalidInputError(f"Argument ('{c}') not in ALPHABET")
        return "".join(
            shift_char(c, direction * self._prng.next_shift()) for c in text
        )
