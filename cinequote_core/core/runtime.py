from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Iterable, Mapping, Sequence

from cinequote_ui.messages import QuizMessage, parse_quiz_message
from cinequote_ui.render import SceneRenderBatch, SceneRenderer
from cinequote_ui.scene import Scene

from cinequote_core.quiz.controller import QuizController, QuizState

from .clock import TickClock

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuizRunResult:
    ticks_run: int
    updates_applied: int
    frames_rendered: int
    messages_dispatched: int
    final_stage: str
    rounds: int
    last_timestamp: int


class QuizRuntime:
    """Holds the live quiz state and scene; drives update, dispatch and render."""

    def __init__(
        self,
        controller: QuizController,
        clock: TickClock,
        renderer: SceneRenderer | None = None,
    ) -> None:
        self._controller = controller
        self._clock = clock
        self._renderer = renderer
        self._state: QuizState | None = None
        self._scene: Scene | None = None
        self._last_error: Exception | None = None

    @property
    def last_error(self) -> Exception | None:
        return self._last_error

    @property
    def state(self) -> QuizState:
        if self._state is None:
            raise RuntimeError("runtime not started")
        return self._state

    @property
    def scene(self) -> Scene:
        if self._scene is None:
            raise RuntimeError("runtime not started")
        return self._scene

    def start(self, now: int) -> None:
        self._clock.reset()
        self._state, self._scene = self._controller.start(now)

    def tick(self, now: int) -> bool:
        """Advance the scene when the clock fires; return whether it did."""

        scene = self.scene
        if not self._clock.should_tick(now):
            return False
        self._scene = scene.update(now)
        return True

    def dispatch(self, message: QuizMessage, now: int) -> None:
        before = self.state.stage
        self._state, self._scene = self._controller.dispatch(self.state, self.scene, message, now)
        LOGGER.debug("dispatched %s at %d: %s -> %s", message, now, before, self._state.stage)

    def render(self, now: int) -> SceneRenderBatch:
        batch = self.scene.render_batch(now)
        if self._renderer is not None:
            try:
                self._renderer.draw_scene_batch(batch)
            except Exception as exc:  # noqa: BLE001
                self._last_error = exc
                raise
        return batch

    def run(
        self,
        script: Mapping[int, Sequence[QuizMessage]] | None = None,
        *,
        max_ticks: int = 10,
        start_at: int = 0,
        realtime: bool = False,
    ) -> QuizRunResult:
        """Run `max_ticks` clock periods, dispatching scripted messages by tick index.

        Simulated time advances by exactly one clock period per tick; with `realtime`
        the loop also sleeps so each tick takes one wall-clock period.
        """

        if max_ticks <= 0:
            raise ValueError("max_ticks must be > 0")
        if start_at < 0:
            raise ValueError("start_at must be >= 0")
        script = script or {}
        self.start(start_at)
        updates = 0
        frames = 0
        dispatched = 0
        now = start_at
        for tick_idx in range(max_ticks):
            now = start_at + tick_idx * self._clock.period_ms
            loop_started = time.perf_counter()
            for message in script.get(tick_idx, ()):
                self.dispatch(message, now)
                dispatched += 1
            if self.tick(now):
                updates += 1
            self.render(now)
            frames += 1
            if realtime:
                sleep_for = self._clock.compute_sleep(loop_started, time.perf_counter())
                if sleep_for > 0:
                    time.sleep(sleep_for)
        LOGGER.info("run complete: ticks=%d updates=%d messages=%d", max_ticks, updates, dispatched)
        return QuizRunResult(
            ticks_run=max_ticks,
            updates_applied=updates,
            frames_rendered=frames,
            messages_dispatched=dispatched,
            final_stage=self.state.stage,
            rounds=self.state.rounds,
            last_timestamp=now,
        )


def parse_script(entries: Iterable[str]) -> dict[int, list[QuizMessage]]:
    """Parse `tick:message` entries into a run script."""

    script: dict[int, list[QuizMessage]] = {}
    for entry in entries:
        raw = entry.strip()
        if not raw:
            continue
        if ":" not in raw:
            raise ValueError(f"script entry must use `tick:message` format: {raw}")
        tick_raw, message_raw = raw.split(":", 1)
        try:
            tick_idx = int(tick_raw.strip())
        except ValueError as exc:
            raise ValueError(f"script tick must be an integer: {raw}") from exc
        if tick_idx < 0:
            raise ValueError(f"script tick must be >= 0: {raw}")
        message = parse_quiz_message(message_raw)
        if message is None:
            raise ValueError(f"unknown quiz message in script: {message_raw.strip()}")
        script.setdefault(tick_idx, []).append(message)
    return script
