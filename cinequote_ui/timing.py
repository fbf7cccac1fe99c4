from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeSpan:
    """One interpolation window in integer milliseconds."""

    start: int
    duration: int

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("TimeSpan duration must be >= 0")

    @property
    def end(self) -> int:
        return self.start + self.duration

    def ratio(self, now: int) -> float:
        """Progress through the span clamped to [0, 1].

        A zero-length span has no interior and counts as already settled.
        """

        if self.duration == 0:
            return 1.0
        raw = (now - self.start) / float(self.duration)
        return min(1.0, max(0.0, raw))
