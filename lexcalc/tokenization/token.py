from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable
import re

from lexcalc.errors import ConfigurationError

TokenType = Hashable

@dataclass(frozen=True)
class Token:
    position: int
    type: TokenType
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ConfigurationError("Token text is empty")
        if self.position < 0:
            raise ConfigurationError(f"Token position {self.position} is negative")

    def __str__(self) -> str:
        return f'({self.type}, {self.text!r} @ {self.position})'

class TokenDefinition:
    """Named pattern recognizing one class of tokens.

    The pattern is compiled once, here, and reused by every call to match_at.
    """

    def __init__(self, type: TokenType, pattern: str, flags: int = 0) -> None:
        if type is None:
            raise ConfigurationError("Token definition type is None")
        if not isinstance(pattern, str):
            raise ConfigurationError(f"Token definition pattern for {type} is {pattern!r}, expected a string")
        try:
            regex = re.compile(pattern, flags)
        except re.error as e:
            raise ConfigurationError(f"Invalid pattern {pattern!r} for {type}: {e}") from e

        self._type = type
        self._pattern = pattern
        self._flags = flags
        self._regex = regex

    @property
    def type(self) -> TokenType:
        return self._type

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def regex(self) -> re.Pattern:
        return self._regex

    def match_at(self, input: str, start: int) -> str|None:
        """Returns the text matched starting exactly at `start`, or None.

        A match that would begin further ahead in `input` does not count, and
        neither does a zero-length match.
        """
        if not isinstance(input, str):
            raise ConfigurationError(f"Cannot match against {input!r}, expected a string")
        if not 0 <= start <= len(input):
            raise IndexError(f"Start offset {start} outside of input of length {len(input)}")

        m = self._regex.match(input, start)
        if not m or not m[0]:
            return None
        return m[0]

    def __repr__(self) -> str:
        return f'TokenDefinition({self._type!r}, {self._pattern!r})'

def create_definition(type: TokenType, pattern: str, flags: int = 0) -> TokenDefinition:
    return TokenDefinition(type, pattern, flags)
