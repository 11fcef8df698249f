# -----------------------------------------------------------------------------
# Types module: Shared value types for the notation converter
# Purpose:
#   Define the notations, token kinds, trace records and conversion results
#   passed between the tokenizer, converters, dispatcher and presentation.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

class Notation(str, Enum):
    """Closed set of expression notations. Values double as wire names."""
    INFIX = "Infix"
    PREFIX = "Prefix"
    POSTFIX = "Postfix"

class TokenKind(Enum):
    OPERAND = "operand"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"

@dataclass(frozen=True)
class TraceStep:
    """
    One unit of progress through a conversion algorithm.
    - sequence_index: 1-based position within the run
    - remaining_input: unconsumed tokens, space-joined, in scan order
    - stack_snapshot: working stack rendered as a string
    - output_so_far: output built so far ('' for algorithms that only emit at the end)
    - action: human-readable label, e.g. "push operator +", "finalize"
    """
    sequence_index: int
    remaining_input: str
    stack_snapshot: str
    output_so_far: str
    action: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sequence_index": self.sequence_index,
            "remaining_input": self.remaining_input,
            "stack_snapshot": self.stack_snapshot,
            "output_so_far": self.output_so_far,
            "action": self.action,
        }

@dataclass(frozen=True)
class ConversionResult:
    """
    Final converted expression plus its ordered trace.
    Example:
        result: "A B C * +"
        steps: (TraceStep(1, "+ B * C", "", "A", "append operand A"), ...)
    """
    result: str
    steps: Tuple[TraceStep, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {"result": self.result, "steps": [s.to_dict() for s in self.steps]}

