"""
NULL — Identity Cipher
======================
Leaves text exactly as it is. This is what a session runs before anyone
picks a real cipher, and it lets the rest of the system treat "no
encryption" like any other cipher.
"""


class NullCipher:
    """Identity cipher. The key is accepted and ignored."""

    def __init__(self, key: str = None):
        pass

    def prepare(self, cleartext: str) -> str:
        return cleartext

    def encrypt(self, preptext: str) -> str:
        return preptext

    def decrypt(self, ciphertext: str) -> str:
        return ciphertext
