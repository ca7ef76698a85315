"""
Option commands: "set or query one cipher setting".

A command names one option and optionally carries a new value. No value
(None or the empty string) means "tell me the current value".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .errors import UnknownOptionError


class OptionTarget(Enum):
    """The cipher settings a user can touch."""

    CIPHER_KEY    = "CIPHER_KEY"
    CIPHER_NAME   = "CIPHER_NAME"
    CIPHER_ENABLE = "CIPHER_ENABLE"

    # short aliases
    KEY    = "CIPHER_KEY"
    NAME   = "CIPHER_NAME"
    ENABLE = "CIPHER_ENABLE"

    def __str__(self):
        return self.name

    @classmethod
    def parse(cls, name: str) -> "OptionTarget":
        """Look up an option by name (or short alias), ignoring case."""
        if isinstance(name, cls):
            return name
        try:
            return cls[name.strip().upper()]
        except (AttributeError, KeyError):
            raise UnknownOptionError(f"'{name}' is not a known option") from None


@dataclass(frozen=True)
class OptionCommand:
    target: OptionTarget
    value: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "target", OptionTarget.parse(self.target))

    @property
    def is_query(self) -> bool:
        return not self.value

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "OptionCommand":
        """
        Build a command from tokenized user input:
            [option]         → query
            [option, value]  → set
        """
        if args is None or len(args) == 0 or len(args) > 2:
            raise UnknownOptionError("Invalid OPTION syntax")
        target = OptionTarget.parse(args[0])
        value  = args[1] if len(args) == 2 else None
        return cls(target, value)
