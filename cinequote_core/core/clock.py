from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TickClock:
    """Fixed-period tick cadence over integer millisecond timestamps."""

    period_ms: int
    _next_tick_at: int | None = None

    def __post_init__(self) -> None:
        if self.period_ms <= 0:
            raise ValueError("period_ms must be > 0")

    @property
    def period_s(self) -> float:
        return self.period_ms / 1000.0

    def should_tick(self, now: int) -> bool:
        if self._next_tick_at is None:
            self._next_tick_at = now
        if now < self._next_tick_at:
            return False
        while self._next_tick_at <= now:
            self._next_tick_at += self.period_ms
        return True

    def reset(self) -> None:
        self._next_tick_at = None

    def compute_sleep(self, loop_started_at: float, loop_finished_at: float) -> float:
        elapsed = max(0.0, loop_finished_at - loop_started_at)
        return max(0.0, self.period_s - elapsed)
