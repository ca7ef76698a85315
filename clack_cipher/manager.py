"""
Cipher Manager
==============
Owns one session's cipher settings and the live cipher built from them.

Settings are (enabled, cipher_name, key). Every change is
validate-then-commit: the candidate cipher is built from the proposed
settings first, and only if that succeeds are the settings and the cipher
swapped in together. A failed change leaves everything exactly as it was.

The manager also answers option commands with a one-line status that the
transport can display as is:

    option CIPHER_NAME = CAESAR_CIPHER
    FAIL: 'MAYBE' not a boolean synonym. option CIPHER_ENABLE = false

One manager per conversation. It is not thread-safe: the pseudo one-time
pad's keystream must be drawn in exactly the order the peer draws it.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from .ciphers import CharacterCipher, CipherKind, build_cipher
from .config import (
    DEFAULT_CIPHER, DEFAULT_ENABLED, DEFAULT_KEY,
    FALSE_SYNONYMS, TRUE_SYNONYMS,
)
from .errors import CipherError, ConstructionError, InvalidInputError
from .options import OptionCommand, OptionTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CipherConfig:
    enabled: bool
    cipher_name: CipherKind
    key: str


def parse_bool(value: Union[bool, str]) -> bool:
    """Map a boolean or a true/false synonym (any case) to a bool."""
    if isinstance(value, bool):
        return value
    if value is None:
        raise InvalidInputError("enable value is null")
    if not isinstance(value, str):
        raise InvalidInputError(f"'{value}' not a boolean synonym")
    upper = value.strip().upper()
    if upper in TRUE_SYNONYMS:
        return True
    if upper in FALSE_SYNONYMS:
        return False
    raise InvalidInputError(f"'{upper}' not a boolean synonym")


class CipherManager:
    """Validate-then-commit holder of a session's cipher settings."""

    def __init__(self, enabled: Union[bool, str] = DEFAULT_ENABLED,
                 cipher_name: Union[str, CipherKind] = DEFAULT_CIPHER,
                 key: str = DEFAULT_KEY):
        if key is None:
            raise ConstructionError("Key cannot be null")
        config = CipherConfig(parse_bool(enabled),
                              CipherKind.parse(cipher_name), key)
        self._state = (config, build_cipher(config.cipher_name, key))
        logger.debug(f"CipherManager {self!r}")

    # ── settings ─────────────────────────────────────────────────────────────

    @property
    def config(self) -> CipherConfig:
        return self._state[0]

    @property
    def cipher(self) -> CharacterCipher:
        return self._state[1]

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    @property
    def cipher_name(self) -> CipherKind:
        return self.config.cipher_name

    @property
    def key(self) -> str:
        return self.config.key

    def set_cipher_options(self, cipher_name: Union[str, CipherKind] = None,
                           key: Optional[str] = None,
                           enabled: Union[bool, str, None] = None) -> CipherConfig:
        """
        Change any subset of the settings at once.

        Unset arguments keep their current values. A new cipher is built
        only when a name or key is given; toggling just the enabled flag
        keeps the live cipher (and its keystream position). Raises, with
        nothing changed, if the new settings do not form a valid cipher.
        """
        current, cipher = self._state
        try:
            candidate = replace(
                current,
                enabled=current.enabled if enabled is None else parse_bool(enabled),
                cipher_name=(current.cipher_name if cipher_name is None
                             else CipherKind.parse(cipher_name)),
                key=current.key if key is None else key,
            )
            if cipher_name is not None or key is not None:
                cipher = build_cipher(candidate.cipher_name, candidate.key)
        except CipherError as e:
            logger.warning(f"Rejected cipher options: {e}")
            raise
        self._state = (candidate, cipher)
        logger.info(f"Cipher options committed: enabled={candidate.enabled} "
                    f"cipher={candidate.cipher_name.name}")
        return candidate

    def set_enabled(self, value: Union[bool, str]) -> None:
        self.set_cipher_options(enabled=parse_bool(value))

    def set_cipher(self, name: Union[str, CipherKind]) -> None:
        self.set_cipher_options(cipher_name=name)

    def set_key(self, key: str) -> None:
        if key is None:
            raise ConstructionError("Key cannot be null")
        self.set_cipher_options(key=key)

    # ── option commands ──────────────────────────────────────────────────────

    def process(self, command: Optional[OptionCommand]) -> str:
        """
        Apply or answer an option command and return the status line.

        A failed update is reported as "FAIL: <reason>. " in front of the
        usual "option <TARGET> = <value>" line, which always shows the
        value in force after the call.
        """
        if command is None:
            return "FAIL: option command was null"
        target = command.target
        reply = ""
        if not command.is_query:
            try:
                if target is OptionTarget.CIPHER_KEY:
                    self.set_key(command.value)
                elif target is OptionTarget.CIPHER_NAME:
                    self.set_cipher(command.value)
                elif target is OptionTarget.CIPHER_ENABLE:
                    self.set_enabled(command.value)
            except CipherError as e:
                reply = f"FAIL: {e}. "
        return f"{reply}option {target.name} = {self._option_value(target)}"

    def _option_value(self, target: OptionTarget) -> str:
        if target is OptionTarget.CIPHER_KEY:
            return self.key
        if target is OptionTarget.CIPHER_NAME:
            return self.cipher_name.name
        return "true" if self.enabled else "false"

    # ── text path ────────────────────────────────────────────────────────────

    def prepare(self, cleartext: str) -> str:
        return self.cipher.prepare(cleartext)

    def encrypt(self, preptext: str) -> str:
        return self.cipher.encrypt(preptext)

    def decrypt(self, ciphertext: str) -> str:
        return self.cipher.decrypt(ciphertext)

    def encode_outgoing(self, text: str) -> str:
        """Prepare and encrypt text if encryption is enabled."""
        if not self.enabled:
            return text
        return self.encrypt(self.prepare(text))

    def decode_incoming(self, text: str) -> str:
        """Decrypt text if encryption is enabled."""
        if not self.enabled:
            return text
        return self.decrypt(text)

    def __repr__(self):
        c = self.config
        return (f"CipherManager(enabled={c.enabled}, "
                f"cipher_name={c.cipher_name.name}, key={c.key!r})")
