# -----------------------------------------------------------------------------
# Tokenizer & token helpers
# Purpose:
#   Split a raw expression string into atomic tokens (operands, operators,
#   parentheses) and expose the precedence/associativity rules shared by the
#   conversion algorithms.
# Scope:
#   - Operands are single letters or maximal runs of decimal digits.
#   - Multi-letter identifiers are NOT merged: "AB" is two operands.
# Safety:
#   - Raises InvalidCharacterError on anything outside [A-Za-z0-9()+-*/^ whitespace].
# -----------------------------------------------------------------------------

# src/nconv/tokenizer.py
from __future__ import annotations
import logging
from typing import List

from .types import TokenKind

logger = logging.getLogger(__name__)

class ConversionError(Exception): pass

class InvalidCharacterError(ConversionError):
    """Raised when the expression holds a character the tokenizer cannot place."""
    def __init__(self, char: str, position: int):
        super().__init__(f"Invalid character: {char}")
        self.char = char
        self.position = position

OPERATORS = "+-*/^"
PARENS = "()"

# Binding strength; anything not listed binds at 0
PRECEDENCE = {"^": 4, "*": 3, "/": 3, "+": 2, "-": 2}
RIGHT_ASSOCIATIVE = {"^"}

def _is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")

def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"

def is_operand(tok: str) -> bool:
    return bool(tok) and (_is_letter(tok[0]) or _is_digit(tok[0]))

def is_operator(tok: str) -> bool:
    return len(tok) == 1 and tok in OPERATORS

def precedence(op: str) -> int:
    return PRECEDENCE.get(op, 0)

def is_right_associative(op: str) -> bool:
    return op in RIGHT_ASSOCIATIVE

def classify(tok: str) -> TokenKind:
    if is_operand(tok):
        return TokenKind.OPERAND
    if is_operator(tok):
        return TokenKind.OPERATOR
    if tok == "(":
        return TokenKind.LPAREN
    if tok == ")":
        return TokenKind.RPAREN
    raise InvalidCharacterError(tok[:1], 0)

def tokenize(expression: str) -> List[str]:
    """
    Split `expression` into tokens.

    Examples
    --------
    >>> tokenize("12 + 3")
    ['12', '+', '3']
    >>> tokenize("AB")
    ['A', 'B']
    """
    tokens: List[str] = []
    i, n = 0, len(expression)
    while i < n:
        ch = expression[i]
        if ch.isspace():
            i += 1
            continue
        if _is_letter(ch):
            tokens.append(ch)
            i += 1
            continue
        if _is_digit(ch):
            # greedy digit run → one numeric operand
            j = i + 1
            while j < n and _is_digit(expression[j]):
                j += 1
            tokens.append(expression[i:j])
            i = j
            continue
        if ch in OPERATORS or ch in PARENS:
            tokens.append(ch)
            i += 1
            continue
        raise InvalidCharacterError(ch, i)
    logger.debug("tokenized %r into %d tokens", expression, len(tokens))
    return tokens
