"""
Alphabet & Arithmetic
=====================
The fixed 26-letter uppercase alphabet every cipher works over, and the
small pure helpers the ciphers are built from: cleaning raw text,
mathematical modulo, letter shifting with wraparound, and grouping
ciphertext into fixed-width blocks for display.

All functions are side-effect free. None passes through clean(), shift()
and group() unchanged so the ciphers can hand it straight back.
"""

from typing import Optional

from .errors import InvalidInputError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_INDEX = {c: i for i, c in enumerate(ALPHABET)}


def clean(text: Optional[str]) -> Optional[str]:
    """Trim, uppercase, and drop every character outside ALPHABET."""
    if text is None:
        return None
    return "".join(c for c in text.strip().upper() if c in _INDEX)


def mod(n: int, modulus: int) -> int:
    """Mathematical modulo: the result is always in [0, modulus)."""
    if modulus < 1:
        raise InvalidInputError("modulus cannot be < 1")
    return n % modulus


def index_of(c: str) -> int:
    """Position of c in ALPHABET."""
    try:
        return _INDEX[c]
    except KeyError:
        raise InvalidInputError(f"Argument ('{c}') not in ALPHABET") from None


def shift_char(c: str, n: int) -> str:
    """
    Return the letter n places past c, wrapping at either end.
    Negative n shifts left; 0 returns c.
    """
    return ALPHABET[mod(index_of(c) + n, len(ALPHABET))]


def shift(text: Optional[str], n: int) -> Optional[str]:
    """Shift every character of text by n places."""
    if text is None:
        return None
    return "".join(shift_char(c, n) for c in text)


def group(text: Optional[str], n: int) -> Optional[str]:
    """
    Break text into groups of n non-whitespace characters separated by
    single spaces. Existing whitespace is dropped first, so regrouping
    already grouped text works. The last group may be shorter; no
    trailing space is added.
    """
    if n < 1:
        raise InvalidInputError("groups must have 1 or more letters")
    if not text:
        return text
    chars = "".join(text.split())
    return " ".join(chars[i:i + n] for i in range(0, len(chars), n))
