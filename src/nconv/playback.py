# -----------------------------------------------------------------------------
# Playback controller
# Purpose:
#   Reveal an already-computed trace one step at a time, either manually
#   (step) or on a timer (start/tick/pause). One controller per conversion;
#   nothing here recomputes or mutates the trace.
# Timing:
#   The "timer" is a due time on an injectable monotonic clock. Callers poll
#   tick() (e.g. a UI render loop) and sleep for seconds_until_due().
# -----------------------------------------------------------------------------

from __future__ import annotations
import time
from typing import Callable, List, Optional, Sequence, Tuple

from .types import ConversionResult, TraceStep

DEFAULT_INTERVAL_MS = 600

class PlaybackController:
    def __init__(self, steps: Sequence[TraceStep], interval_ms: int = DEFAULT_INTERVAL_MS,
                 clock: Callable[[], float] = time.monotonic):
        self.steps: Tuple[TraceStep, ...] = tuple(steps)
        self.cursor = 0                       # number of steps revealed
        self.interval_ms = max(1, int(interval_ms))
        self._clock = clock
        self._due: Optional[float] = None     # None ⇔ paused

    @classmethod
    def for_result(cls, result: ConversionResult, interval_ms: int = DEFAULT_INTERVAL_MS,
                   clock: Callable[[], float] = time.monotonic) -> "PlaybackController":
        return cls(result.steps, interval_ms=interval_ms, clock=clock)

    # ---------------- state ----------------

    @property
    def running(self) -> bool:
        return self._due is not None

    @property
    def finished(self) -> bool:
        return self.cursor >= len(self.steps)

    @property
    def revealed(self) -> Tuple[TraceStep, ...]:
        return self.steps[:self.cursor]

    @property
    def active_index(self) -> Optional[int]:
        # Row to highlight: the most recently revealed step
        return self.cursor - 1 if self.cursor else None

    def seconds_until_due(self) -> float:
        if self._due is None:
            return 0.0
        return max(0.0, self._due - self._clock())

    # ---------------- controls ----------------

    def _advance(self) -> TraceStep:
        step = self.steps[self.cursor]
        self.cursor += 1
        return step

    def start(self) -> None:
        # Restarting an active timer resets its phase, like re-arming setInterval.
        if self.finished:
            self._due = None
            return
        self._due = self._clock() + self.interval_ms / 1000.0

    def pause(self) -> None:
        self._due = None

    def step(self) -> Optional[TraceStep]:
        """Reveal one step by hand. Ignored while the timer runs or once finished."""
        if self.running or self.finished:
            return None
        return self._advance()

    def tick(self) -> List[TraceStep]:
        """Reveal every step whose due time has passed; stops the timer at the end."""
        out: List[TraceStep] = []
        if self._due is None:
            return out
        now = self._clock()
        while self._due is not None and now >= self._due and not self.finished:
            out.append(self._advance())
            self._due += self.interval_ms / 1000.0
        if self.finished:
            self._due = None
        return out

    def reset(self) -> None:
        self.cursor = 0
        self._due = None

    def set_interval(self, interval_ms: int) -> None:
        self.interval_ms = max(1, int(interval_ms))
        if self.running:
            self.start()
