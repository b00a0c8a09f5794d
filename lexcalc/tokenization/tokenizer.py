from __future__ import annotations
from typing import Iterator, Sequence
import logging

from lexcalc.errors import ConfigurationError
from lexcalc.tokenization.token import Token, TokenDefinition

logger = logging.getLogger(__name__)

class Tokenizer:
    """Single-pass token iterator over `text`.

    Each step tries the definitions in order at the cursor and emits the first
    match. When nothing matches, the scan stops for good: no error is raised,
    the iterator simply ends. Check `failed` or `position` to find out whether
    the whole text was consumed.

    The iterator holds a cursor and cannot be rewound; build a new tokenizer to
    scan the same text again.
    """

    def __init__(self, definitions: Sequence[TokenDefinition], text: str) -> None:
        definitions = tuple(definitions) if definitions is not None else ()
        if not definitions:
            raise ConfigurationError("Tokenizer definitions are None or empty")
        if not all(isinstance(d, TokenDefinition) for d in definitions):
            raise ConfigurationError("Tokenizer definitions must all be TokenDefinition instances")
        if not isinstance(text, str):
            raise ConfigurationError(f"Tokenizer text is {text!r}, expected a string")

        self._definitions = definitions
        self._text = text
        self._cursor = 0
        self._failed = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._cursor

    @property
    def failed(self) -> bool:
        return self._failed

    @property
    def exhausted(self) -> bool:
        return self._failed or self._cursor >= len(self._text)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self.exhausted:
            raise StopIteration

        for definition in self._definitions:
            value = definition.match_at(self._text, self._cursor)
            if value is not None:
                token = Token(self._cursor, definition.type, value)
                self._cursor += len(value)
                return token

        logger.debug("No definition matches %r at offset %d, stopping scan",
                     self._text[self._cursor], self._cursor)
        self._failed = True
        raise StopIteration

    def __repr__(self) -> str:
        return f'Tokenizer({len(self._definitions)} definitions, position={self._cursor}, failed={self._failed})'

def tokenize(definitions: Sequence[TokenDefinition], text: str) -> Tokenizer:
    return Tokenizer(definitions, text)
