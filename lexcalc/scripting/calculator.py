from __future__ import annotations
from typing import List
import logging

from lexcalc.errors import MalformedExpressionError
from lexcalc.scripting import rpn
from lexcalc.tokenization.token import Token

logger = logging.getLogger(__name__)

def calc(expression: str, strict: bool = False) -> int:
    """Evaluates an infix expression of positive integers and + - * /.

    Tokenizing stops silently at the first character the grammar does not
    know, and whatever was read up to there is evaluated. With `strict`, such
    an expression is rejected instead.
    """
    if not strict:
        return rpn.calc(rpn.parse(expression))

    tokenizer = rpn.scan(expression)
    tokens: List[Token] = list(rpn.significant(tokenizer))
    if tokenizer.failed:
        raise MalformedExpressionError(
            f"Unexpected character {expression[tokenizer.position]!r} at offset {tokenizer.position}")
    return rpn.calc(rpn.to_postfix(tokens))

def to_rpn(expression: str) -> str:
    notation = ' '.join(token.text for token in rpn.parse(expression))
    logger.debug("%r -> %r", expression, notation)
    return notation
