"""
Keystream Generator
===================
Deterministic source of per-character shifts for the pseudo one-time pad.

The generator is a ChaCha20 stream keyed from a 64-bit seed. The seed is
stretched to a 256-bit ChaCha20 key with SHA-256 and the stream is opened
with a fixed nonce, so the output depends on the seed alone and never on
wall-clock time. Two generators built from the same seed, on either side
of a conversation, produce the same shifts in the same order.

Shifts are drawn by rejection sampling: stream bytes >= 234 (9 × 26) are
discarded so every shift in [0, 26) is equally likely.

The generator has no position, peek or rewind. Synchronisation between
peers is entirely implicit in the number and order of draws; one missed
or extra draw desynchronises them for good.

Dependencies: cryptography >= 41.0
"""

import hashlib
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from .config import KEYSTREAM_BLOCK, KEYSTREAM_NONCE, OTP_SPLIT
from .errors import ConstructionError

logger = logging.getLogger(__name__)

MASK_32 = (1 << 32) - 1
MASK_64 = (1 << 64) - 1

RADIX  = 26
_LIMIT = 256 - (256 % RADIX)   # 234


def _hash32(text: str) -> int:
    """32-bit hash of text; the empty string hashes to 0."""
    if not text:
        return 0
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError:
        raise ConstructionError("Key contains a character that cannot be encoded") from None
    digest = hashlib.sha256(data).digest()
    return int.from_bytes(digest[:4], "big")


def _reverse64(n: int) -> int:
    """Reverse the bit order of a 64-bit value."""
    return int(format(n & MASK_64, "064b")[::-1], 2)


def derive_seed(key: str) -> int:
    """
    Derive a 64-bit seed from a key phrase.

    The first 32 characters hash into the low-order bits. Any remaining
    characters hash into 32 bits that are bit-reversed into the
    high-order half. The two halves are combined with XOR.
    """
    low  = _hash32(key[:OTP_SPLIT])
    high = _reverse64(_hash32(key[OTP_SPLIT:]))
    return (low ^ high) & MASK_64


class KeystreamGenerator:
    """Sequential, seeded source of shift values in [0, 26)."""

    def __init__(self, seed: int):
        seed &= MASK_64
        key = hashlib.sha256(seed.to_bytes(8, "big")).digest()
        self._stream = Cipher(
            algorithms.ChaCha20(key, KEYSTREAM_NONCE), mode=None
        ).encryptor()
        self._buffer = b""
        self._pos    = 0
        logger.debug("Keystream seeded")

    def next_shift(self) -> int:
        """Draw the next shift. Each call consumes the stream."""
        while True:
            if self._pos >= len(self._buffer):
                self._buffer = self._stream.update(b"\x00" * KEYSTREAM_BLOCK)
                self._pos    = 0
            b = self._buffer[self._pos]
            self._pos += 1
            if b < _LIMIT:
                return b % RADIX

    def __copy__(self):
        raise TypeError("KeystreamGenerator cannot be copied; "
                        "build a second generator from the same seed")

    def __deepcopy__(self, memo):
        return self.__copy__()

    def __repr__(self):
        return "KeystreamGenerator(ChaCha20)"
