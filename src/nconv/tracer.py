# -----------------------------------------------------------------------------
# Tracing utility
# Purpose:
#   Lightweight, append-only collector for conversion trace steps. Assigns the
#   1-based sequence index so algorithms only describe what happened.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import List, Tuple
from .types import TraceStep

class Tracer:
    def __init__(self): self._steps: List[TraceStep] = []
    def __len__(self) -> int: return len(self._steps)
    def add(self, remaining: str, stack: str, output: str, action: str) -> TraceStep:
        step = TraceStep(len(self._steps) + 1, remaining, stack, output, action)
        self._steps.append(step)
        return step
    def steps(self) -> Tuple[TraceStep, ...]:
        # Frozen copy; the collector may keep growing after export.
        return tuple(self._steps)
