from __future__ import annotations

import unittest

from cinequote_core.core.clock import TickClock


class TickClockTests(unittest.TestCase):
    def test_rejects_invalid_period(self) -> None:
        with self.assertRaises(ValueError):
            TickClock(period_ms=0)

    def test_should_tick_tracks_cadence(self) -> None:
        clock = TickClock(period_ms=1000)
        fired = sum(1 for now in range(0, 10_000, 100) if clock.should_tick(now))
        self.assertEqual(fired, 10)

    def test_should_tick_recovers_after_stall(self) -> None:
        clock = TickClock(period_ms=1000)
        self.assertTrue(clock.should_tick(0))
        # A long pause fires once on resume rather than replaying missed ticks.
        self.assertTrue(clock.should_tick(60_000))
        self.assertFalse(clock.should_tick(60_000))
        self.assertTrue(clock.should_tick(61_000))

    def test_reset_restarts_cadence(self) -> None:
        clock = TickClock(period_ms=500)
        self.assertTrue(clock.should_tick(100))
        self.assertFalse(clock.should_tick(200))
        clock.reset()
        self.assertTrue(clock.should_tick(200))

    def test_compute_sleep_handles_negative_elapsed(self) -> None:
        clock = TickClock(period_ms=10)
        self.assertAlmostEqual(clock.compute_sleep(loop_started_at=10.0, loop_finished_at=9.0), 0.01, places=6)
        self.assertEqual(clock.compute_sleep(loop_started_at=0.0, loop_finished_at=5.0), 0.0)


if __name__ == "__main__":
    unittest.main()
