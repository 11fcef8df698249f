from __future__ import annotations
from typing import Dict, Iterable, List

from .types import TraceStep

PLACEHOLDER = "-"
HEADER = ["Iter", "Input", "Stack", "Output", "Action"]

def display_row(step: TraceStep) -> Dict[str, str]:
    # Empty stack/output cells show a dash; input and action stay as-is.
    return {
        "Iter": str(step.sequence_index),
        "Input": step.remaining_input,
        "Stack": step.stack_snapshot or PLACEHOLDER,
        "Output": step.output_so_far or PLACEHOLDER,
        "Action": step.action or "",
    }

def display_rows(steps: Iterable[TraceStep]) -> List[Dict[str, str]]:
    return [display_row(s) for s in steps]

def _cell(text: str) -> str:
    return text.replace("|", "\\|")

def steps_to_markdown(steps: Iterable[TraceStep]) -> str:
    lines = [
        f"| {' | '.join(HEADER)} |",
        f"| {' | '.join('---' for _ in HEADER)} |",
    ]
    for row in display_rows(steps):
        lines.append(f"| {' | '.join(_cell(row[h]) for h in HEADER)} |")
    return "\n".join(lines)
