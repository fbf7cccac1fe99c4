from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import random
from typing import Literal

from cinequote_ui.choreography import grow_line, shrink_line
from cinequote_ui.messages import QuizMessage
from cinequote_ui.props import Position, button, label
from cinequote_ui.scene import Scene
from cinequote_ui.style.theme import DEFAULT_THEME, StageTheme

from .quotes import QUOTES, QuoteRecord, masked_quote, quote_at

LOGGER = logging.getLogger(__name__)

QuizStage = Literal["question", "character", "movie", "answer"]

QUOTE_LINE = "Quote"
CHARACTER_LINE = "Character"
MOVIE_LINE = "Movie"
SCORE_LINE = "Score"
HINT_BUTTON = "HintButton"
ANSWER_BUTTON = "AnswerButton"
NEXT_BUTTON = "NextButton"

UNKNOWN_TEXT = "?"


@dataclass(frozen=True)
class QuizTimings:
    grow_duration_ms: int = 1000
    start_width_px: int = 20
    end_width_px: int = 800

    def __post_init__(self) -> None:
        if self.grow_duration_ms < 0:
            raise ValueError("grow_duration_ms must be >= 0")
        if self.start_width_px < 0 or self.end_width_px < 0:
            raise ValueError("line widths must be >= 0")


@dataclass(frozen=True)
class QuizState:
    position: int
    order: tuple[int, ...]
    stage: QuizStage = "question"
    rounds: int = 1

    @property
    def quote_index(self) -> int:
        return self.order[self.position]

    @property
    def record(self) -> QuoteRecord:
        return quote_at(self.quote_index)


class QuizController:
    """Maps click messages onto scene choreography for the movie-quote quiz."""

    def __init__(
        self,
        *,
        theme: StageTheme = DEFAULT_THEME,
        timings: QuizTimings | None = None,
        seed: int | None = None,
        quote_count: int | None = None,
    ) -> None:
        count = len(QUOTES) if quote_count is None else quote_count
        if count <= 0 or count > len(QUOTES):
            raise ValueError(f"quote_count must be in [1, {len(QUOTES)}]")
        self._theme = theme
        self._timings = timings or QuizTimings()
        self._rng = random.Random(seed)
        self._quote_count = count

    @property
    def theme(self) -> StageTheme:
        return self._theme

    @property
    def timings(self) -> QuizTimings:
        return self._timings

    def start(self, now: int) -> tuple[QuizState, Scene]:
        _ = now
        state = QuizState(position=0, order=self._shuffled_order())
        theme = self._theme
        box = theme.button_size_px
        props = {
            QUOTE_LINE: label(Position(40, 40), masked_quote(state.record), theme=theme),
            CHARACTER_LINE: label(Position(40, 100), UNKNOWN_TEXT, theme=theme),
            MOVIE_LINE: label(Position(40, 160), UNKNOWN_TEXT, theme=theme),
            SCORE_LINE: label(Position(40, 220), _round_text(state), theme=theme),
            HINT_BUTTON: button(Position(40, 280), "Hint", "reveal_hint", theme=theme),
            ANSWER_BUTTON: button(Position(60 + box, 280), "Answer", "show_answer", theme=theme),
            NEXT_BUTTON: button(Position(80 + 2 * box, 280), "Next", "next_quote", theme=theme),
        }
        scene = Scene.from_props(props, theme=theme)
        scene = shrink_line(scene, CHARACTER_LINE, UNKNOWN_TEXT)
        scene = shrink_line(scene, MOVIE_LINE, UNKNOWN_TEXT)
        LOGGER.info("quiz started with %d quotes", len(state.order))
        return state, scene

    def dispatch(
        self,
        state: QuizState,
        scene: Scene,
        message: QuizMessage,
        now: int,
    ) -> tuple[QuizState, Scene]:
        if message == "reveal_hint":
            return self._reveal_hint(state, scene, now)
        if message == "show_answer":
            return self._show_answer(state, scene, now)
        if message == "next_quote":
            return self._next_quote(state, scene)
        if message == "noop":
            return state, scene
        raise ValueError(f"unknown quiz message: {message}")

    def _reveal_hint(self, state: QuizState, scene: Scene, now: int) -> tuple[QuizState, Scene]:
        record = state.record
        if state.stage == "question":
            scene = self._grow(scene, CHARACTER_LINE, f"Character: {record.character}", now)
            return replace(state, stage="character"), scene
        if state.stage == "character":
            scene = self._grow(scene, MOVIE_LINE, f"Movie: {record.movie} ({record.year})", now)
            return replace(state, stage="movie"), scene
        LOGGER.debug("no hint left at stage `%s`", state.stage)
        return state, scene

    def _show_answer(self, state: QuizState, scene: Scene, now: int) -> tuple[QuizState, Scene]:
        if state.stage == "answer":
            return state, scene
        scene = self._grow(scene, QUOTE_LINE, state.record.quote, now)
        return replace(state, stage="answer"), scene

    def _next_quote(self, state: QuizState, scene: Scene) -> tuple[QuizState, Scene]:
        position = state.position + 1
        order = state.order
        if position >= len(order):
            order = self._shuffled_order()
            position = 0
            LOGGER.info("quote order exhausted; reshuffled")
        state = QuizState(position=position, order=order, stage="question", rounds=state.rounds + 1)
        theme = self._theme
        # Lines are rebuilt from their factories so modifiers do not pile up across rounds.
        scene = scene.upsert(QUOTE_LINE, label(Position(40, 40), masked_quote(state.record), theme=theme))
        scene = scene.upsert(CHARACTER_LINE, label(Position(40, 100), UNKNOWN_TEXT, theme=theme))
        scene = scene.upsert(MOVIE_LINE, label(Position(40, 160), UNKNOWN_TEXT, theme=theme))
        scene = shrink_line(scene, CHARACTER_LINE, UNKNOWN_TEXT)
        scene = shrink_line(scene, MOVIE_LINE, UNKNOWN_TEXT)
        scene = scene.set_text_of_prop(SCORE_LINE, _round_text(state))
        return state, scene

    def _grow(self, scene: Scene, name: str, text: str, now: int) -> Scene:
        t = self._timings
        return grow_line(
            scene,
            name,
            text,
            now=now,
            duration_ms=t.grow_duration_ms,
            start_width_px=t.start_width_px,
            end_width_px=t.end_width_px,
        )

    def _shuffled_order(self) -> tuple[int, ...]:
        order = list(range(self._quote_count))
        self._rng.shuffle(order)
        return tuple(order)


def _round_text(state: QuizState) -> str:
    return f"Round {state.rounds}"
