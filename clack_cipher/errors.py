"""
Errors raised by the cipher subsystem.

Every error is a ValueError, so callers that only care about "bad key or
bad input" can catch that. Messages are shown to the end user verbatim by
CipherManager.process(), so they carry no trailing period.
"""


class CipherError(ValueError):
    """Base class for every cipher subsystem error."""


class ConstructionError(CipherError):
    """The proposed (cipher name, key) pair cannot form a cipher."""


class UnknownCipherNameError(ConstructionError):
    """A cipher name does not match any supported cipher kind."""


class InvalidInputError(CipherError):
    """An operation was called with malformed arguments."""


class UnknownOptionError(CipherError):
    """An option target does not match any supported option."""
