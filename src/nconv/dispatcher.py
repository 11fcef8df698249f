# -----------------------------------------------------------------------------
# Conversion dispatcher
# Purpose: Route a (source, target) notation pair to its conversion algorithm.
# - Identity pairs short-circuit with a single "same notation" step.
# - Everything else goes through REGISTRY; unknown pairs raise.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Callable, Dict, List, Tuple, Union

from .converters import (
    infix_to_postfix,
    infix_to_prefix,
    postfix_to_infix,
    prefix_to_infix,
    postfix_to_prefix,
    prefix_to_postfix,
)
from .tokenizer import ConversionError
from .tracer import Tracer
from .types import ConversionResult, Notation

logger = logging.getLogger(__name__)

class UnsupportedConversionError(ConversionError):
    def __init__(self, source: object, target: object):
        super().__init__(f"Unsupported conversion: {_label(source)} -> {_label(target)}")
        self.source = source
        self.target = target

REGISTRY: Dict[Tuple[Notation, Notation], Callable[[str], ConversionResult]] = {
    (Notation.INFIX, Notation.POSTFIX): infix_to_postfix,
    (Notation.INFIX, Notation.PREFIX): infix_to_prefix,
    (Notation.POSTFIX, Notation.INFIX): postfix_to_infix,
    (Notation.PREFIX, Notation.INFIX): prefix_to_infix,
    (Notation.POSTFIX, Notation.PREFIX): postfix_to_prefix,
    (Notation.PREFIX, Notation.POSTFIX): prefix_to_postfix,
}

NotationLike = Union[Notation, str]

def _label(n: object) -> str:
    return n.value if isinstance(n, Notation) else str(n)

def _coerce(n: NotationLike) -> Notation | None:
    if isinstance(n, Notation):
        return n
    try:
        return Notation(n)
    except ValueError:
        return None

def supported_conversions() -> List[Tuple[Notation, Notation]]:
    return list(REGISTRY.keys())

def convert(source: NotationLike, target: NotationLike, expression: str) -> ConversionResult:
    """
    Convert `expression` from `source` notation to `target` notation.

    Parameters
    ----------
    source, target : Notation | str
        Notation members or their values ("Infix", "Prefix", "Postfix").
    expression : str
        Raw expression; callers are expected to trim it.

    Returns
    -------
    ConversionResult
        The converted expression and its full trace.

    Raises
    ------
    InvalidCharacterError
        The expression holds a character outside the token alphabet.
    UnsupportedConversionError
        The pair is not a registered conversion.
    """
    src, tgt = _coerce(source), _coerce(target)
    if src is None or tgt is None:
        raise UnsupportedConversionError(source, target)

    # Identity: no tokenizing, the expression passes through untouched
    if src is tgt:
        trace = Tracer()
        trace.add(expression, "", expression, "same notation")
        return ConversionResult(expression, trace.steps())

    fn = REGISTRY.get((src, tgt))
    if fn is None:
        raise UnsupportedConversionError(src, tgt)
    logger.debug("converting %s -> %s: %r", src.value, tgt.value, expression)
    return fn(expression)
