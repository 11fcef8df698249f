# -----------------------------------------------------------------------------
# Conversion engine
# Responsibilities:
#   • Infix → Postfix via shunting-yard (precedence + right-assoc '^')
#   • A generic trace-emitting stack reducer for the fragment algorithms:
#       postfix → infix, prefix → infix, postfix → prefix, prefix → postfix
#     parameterized by scan direction, combine function and step label
#   • Infix → Prefix as a composite (infix → postfix → prefix)
# Malformed input never raises here: missing operands render as empty
# segments, leftovers are dropped, and every degradation is logged.
# -----------------------------------------------------------------------------

# src/nconv/converters.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Sequence, Tuple

from .tokenizer import tokenize, classify, is_operator, precedence, is_right_associative
from .tracer import Tracer
from .types import ConversionResult, TokenKind

logger = logging.getLogger(__name__)

# --------------------------
# Scan helpers
# --------------------------

def _scan(tokens: Sequence[str], reverse: bool) -> Iterator[Tuple[str, str]]:
    """
    Yield (token, remaining_input) in scan order.
    Left-to-right: remaining is everything after the token.
    Right-to-left: remaining is everything still to the token's left.
    """
    if reverse:
        for i in range(len(tokens) - 1, -1, -1):
            yield tokens[i], " ".join(tokens[:i])
    else:
        for i, tok in enumerate(tokens):
            yield tok, " ".join(tokens[i + 1:])

def _pop_operand(stack: List[str], op: str) -> str:
    if stack:
        return stack.pop()
    logger.warning("Missing operand for %r; using an empty segment", op)
    return ""

def _unwrap_outer(fragment: str) -> str:
    """Strip one outer pair of parentheses, only if the pair encloses the whole fragment."""
    if len(fragment) < 2 or fragment[0] != "(" or fragment[-1] != ")":
        return fragment
    depth = 0
    for i, ch in enumerate(fragment):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        # outer '(' closed before the end: "(A + B) * (C + D)"
        if depth == 0 and i < len(fragment) - 1:
            return fragment
    return fragment[1:-1]

# --------------------------
# Shunting-yard
# --------------------------

def _top_pops_before(top: str, tok: str) -> bool:
    p_top, p_tok = precedence(top), precedence(tok)
    return p_top > p_tok or (p_top == p_tok and not is_right_associative(tok))

def infix_to_postfix(expr: str) -> ConversionResult:
    """
    Shunting-yard with a step per token plus one closing step.
    The stack column is the operator stack joined without separators,
    the output column the postfix built so far.
    """
    tokens = tokenize(expr)
    trace = Tracer()
    output: List[str] = []
    stack: List[str] = []

    for tok, remaining in _scan(tokens, reverse=False):
        kind = classify(tok)
        if kind is TokenKind.OPERAND:
            output.append(tok)
            action = f"append operand {tok}"
        elif kind is TokenKind.LPAREN:
            stack.append(tok)
            action = "push ("
        elif kind is TokenKind.RPAREN:
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
            else:
                logger.warning("Unmatched ')' in %r", expr)
            action = "pop till ( and discard )"
        else:
            while stack and is_operator(stack[-1]) and _top_pops_before(stack[-1], tok):
                output.append(stack.pop())
            stack.append(tok)
            action = f"push operator {tok}"
        trace.add(remaining, "".join(stack), " ".join(output), action)

    if "(" in stack:
        logger.warning("Unmatched '(' in %r; flushed to output", expr)
    while stack:
        output.append(stack.pop())
    # always emitted, even when the stack is already empty
    trace.add("", "", " ".join(output), "pop remaining operators")
    return ConversionResult(" ".join(output), trace.steps())

# --------------------------
# Generic fragment reducer
# --------------------------

@dataclass(frozen=True)
class FragmentRule:
    """
    One stack-of-fragments algorithm.
    - reverse: scan right-to-left when True
    - combine(op, first_popped, second_popped) → new fragment
    - label(op, first_popped, second_popped, fragment) → action text
    - unwrap: strip one outer paren pair from the final fragment
    """
    reverse: bool
    combine: Callable[[str, str, str], str]
    label: Callable[[str, str, str, str], str]
    unwrap: bool = False

def reduce_fragments(tokens: Sequence[str], rule: FragmentRule) -> ConversionResult:
    trace = Tracer()
    stack: List[str] = []

    for tok, remaining in _scan(tokens, rule.reverse):
        kind = classify(tok)
        if kind is TokenKind.OPERAND:
            stack.append(tok)
            action = f"push {tok}"
        elif kind is TokenKind.OPERATOR:
            first = _pop_operand(stack, tok)
            second = _pop_operand(stack, tok)
            fragment = rule.combine(tok, first, second)
            stack.append(fragment)
            action = rule.label(tok, first, second, fragment)
        else:
            # parentheses carry no meaning in prefix/postfix input
            logger.warning("Ignoring %r in parenthesis-free notation", tok)
            action = f"ignore {tok}"
        trace.add(remaining, " ".join(stack), "", action)

    if len(stack) > 1:
        logger.warning("%d fragments left on the stack; keeping the top one", len(stack))
    result = stack.pop() if stack else ""
    if rule.unwrap:
        result = _unwrap_outer(result)
    trace.add("", "", result, "finalize")
    return ConversionResult(result, trace.steps())

def _infix_label(op: str, left: str, right: str, fragment: str) -> str:
    return f"combine {left} {op} {right}"

def _formed_label(op: str, first: str, second: str, fragment: str) -> str:
    return f"combine -> {fragment}"

# Postfix scan pops the right operand first; prefix scan (reversed) pops the left first.
POSTFIX_TO_INFIX = FragmentRule(
    reverse=False,
    combine=lambda op, right, left: f"({left} {op} {right})",
    label=lambda op, right, left, fragment: _infix_label(op, left, right, fragment),
    unwrap=True,
)
PREFIX_TO_INFIX = FragmentRule(
    reverse=True,
    combine=lambda op, left, right: f"({left} {op} {right})",
    label=_infix_label,
    unwrap=True,
)
POSTFIX_TO_PREFIX = FragmentRule(
    reverse=False,
    combine=lambda op, b, a: f"{op} {a} {b}",
    label=_formed_label,
)
PREFIX_TO_POSTFIX = FragmentRule(
    reverse=True,
    combine=lambda op, a, b: f"{a} {b} {op}",
    label=_formed_label,
)

def postfix_to_infix(expr: str) -> ConversionResult:
    return reduce_fragments(tokenize(expr), POSTFIX_TO_INFIX)

def prefix_to_infix(expr: str) -> ConversionResult:
    return reduce_fragments(tokenize(expr), PREFIX_TO_INFIX)

def postfix_to_prefix(expr: str) -> ConversionResult:
    return reduce_fragments(tokenize(expr), POSTFIX_TO_PREFIX)

def prefix_to_postfix(expr: str) -> ConversionResult:
    return reduce_fragments(tokenize(expr), PREFIX_TO_POSTFIX)

def infix_to_prefix(expr: str) -> ConversionResult:
    # First stage's trace is discarded; only postfix → prefix is reported.
    postfix = infix_to_postfix(expr).result
    return postfix_to_prefix(postfix)
