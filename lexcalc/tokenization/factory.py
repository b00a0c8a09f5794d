from __future__ import annotations
from typing import Dict, Tuple

from lexcalc.errors import ConfigurationError
from lexcalc.tokenization.token import TokenDefinition, TokenType
from lexcalc.tokenization.tokenizer import Tokenizer

class TokenizerFactory:
    """Ordered, type-keyed set of token definitions.

    Definitions are tried in registration order, so register the more specific
    patterns first. Typical use chains the registrations:

        factory = (TokenizerFactory()
            .define('word', r'[a-z]+', re.IGNORECASE)
            .define('space', r'\\s+'))
        words = [t.text for t in factory.tokenize(text) if t.type == 'word']
    """

    def __init__(self, flags: int = 0) -> None:
        self._flags = flags
        self._definitions: Dict[TokenType, TokenDefinition] = {}

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def definitions(self) -> Tuple[TokenDefinition, ...]:
        return tuple(self._definitions.values())

    def define(self, type: TokenType, pattern: str, flags: int|None = None) -> TokenizerFactory:
        if pattern is None:
            raise ConfigurationError(f"Pattern for {type} is None")
        if type in self._definitions:
            raise ConfigurationError(f"Token type {type} is already defined")

        definition = TokenDefinition(type, pattern, self._flags if flags is None else flags)
        self._definitions[type] = definition
        return self

    def tokenize(self, text: str) -> Tokenizer:
        if text is None:
            raise ConfigurationError("Text to tokenize is None")
        return Tokenizer(self.definitions, text)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, type: TokenType) -> bool:
        return type in self._definitions
