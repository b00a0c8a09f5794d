from __future__ import annotations
from enum import Enum, auto
from typing import Callable, Dict, Iterable, Iterator, List, Set
import logging

from lexcalc.errors import MalformedExpressionError
from lexcalc.tokenization.factory import TokenizerFactory
from lexcalc.tokenization.token import Token, TokenType
from lexcalc.tokenization.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

class TokenId(Enum):
    NUMBER = auto()
    OP_PLUS = auto()
    OP_MINUS = auto()
    OP_MUL = auto()
    OP_DIV = auto()
    SPACE = auto()

# Definition order is match order
grammar = (TokenizerFactory()
    .define(TokenId.NUMBER, r'[1-9][0-9]*')
    .define(TokenId.OP_PLUS, r'[+]')
    .define(TokenId.OP_MINUS, r'[-]')
    .define(TokenId.OP_MUL, r'[*]')
    .define(TokenId.OP_DIV, r'[/]')
    .define(TokenId.SPACE, r'\s+'))

operand_ids = {TokenId.NUMBER}
ignored_ids = {TokenId.SPACE}

add_ops = [TokenId.OP_PLUS, TokenId.OP_MINUS]
mul_ops = [TokenId.OP_MUL, TokenId.OP_DIV]

# Operators of a higher tier bind tighter
precedence_map = {op: 1 for op in add_ops}
precedence_map.update({op: 2 for op in mul_ops})

def truncating_div(n: int, m: int) -> int:
    q = abs(n) // abs(m)
    return q if (n < 0) == (m < 0) else -q

# Operators take the second-to-top operand first: op(n, m) for a stack [.., n, m]
op_map: Dict[TokenId, Callable[[int, int], int]] = {
    TokenId.OP_PLUS: lambda n, m: n + m,
    TokenId.OP_MINUS: lambda n, m: n - m,
    TokenId.OP_MUL: lambda n, m: n * m,
    TokenId.OP_DIV: truncating_div,
}

def scan(expression: str) -> Tokenizer:
    return grammar.tokenize(expression)

def significant(tokens: Iterable[Token], ignored: Set[TokenType] = ignored_ids) -> Iterator[Token]:
    return (token for token in tokens if token.type not in ignored)

def to_postfix(tokens: Iterable[Token],
               precedence: Dict[TokenType, int] = precedence_map,
               operands: Set[TokenType] = operand_ids) -> Iterator[Token]:
    """Lazily reorders infix `tokens` into postfix order.

    Operands are yielded as soon as they are read. An operator first releases
    every stacked operator binding at least as tightly, which keeps operators of
    the same tier left-associative, then waits on the stack itself.
    """
    stack: List[Token] = []

    def rank(token: Token) -> int:
        if token.type not in precedence:
            raise MalformedExpressionError(f"Unexpected token {token}")
        return precedence[token.type]

    for token in tokens:
        if token.type in operands:
            yield token
            continue
        incoming = rank(token)
        while stack and rank(stack[-1]) >= incoming:
            yield stack.pop()
        stack.append(token)

    while stack:
        yield stack.pop()

def parse(expression: str) -> Iterator[Token]:
    """Returns the tokens of `expression` in postfix order, spaces removed."""
    return to_postfix(significant(scan(expression)))

def calc(notation: Iterable[Token]) -> int:
    """Evaluates a postfix token sequence; the empty sequence evaluates to 0."""
    stack: List[int] = []

    for token in notation:
        if token.type in operand_ids:
            stack.append(int(token.text))
            continue
        if token.type not in op_map:
            raise MalformedExpressionError(f"Unknown operator {token}")
        if len(stack) < 2:
            raise MalformedExpressionError(f"Missing operand for {token}")
        m = stack.pop()
        n = stack.pop()
        stack.append(op_map[token.type](n, m))

    if len(stack) > 1:
        logger.debug("Residual values on the stack: %s", stack)
        raise MalformedExpressionError(f"Expression leaves {len(stack)} values, expected one")
    return stack[0] if stack else 0
