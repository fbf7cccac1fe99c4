from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any, Mapping

from cinequote_ui.style.theme import DEFAULT_THEME, StageTheme, validate_theme_tokens

from cinequote_core.quiz.controller import QuizTimings


@dataclass(frozen=True)
class QuizConfig:
    tick_ms: int = 1000
    seed: int | None = None
    timings: QuizTimings = field(default_factory=QuizTimings)
    theme: StageTheme = DEFAULT_THEME

    def __post_init__(self) -> None:
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be > 0")


def load_config(path: str | Path | None = None) -> QuizConfig:
    """Load `quiz.toml`; `None` yields the defaults."""

    if path is None:
        return QuizConfig()
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"quiz config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return parse_config(raw)


def parse_config(raw: Mapping[str, Any]) -> QuizConfig:
    unknown = set(raw) - {"tick_ms", "seed", "timings", "theme"}
    if unknown:
        raise ValueError("unknown config keys: " + ", ".join(sorted(unknown)))
    tick_ms = _coerce_int(raw.get("tick_ms", 1000), "tick_ms")
    seed_raw = raw.get("seed")
    seed = None if seed_raw is None else _coerce_int(seed_raw, "seed")
    timings_raw = _coerce_table(raw.get("timings", {}), "timings")
    defaults = QuizTimings()
    timings = QuizTimings(
        grow_duration_ms=_coerce_int(timings_raw.get("grow_duration_ms", defaults.grow_duration_ms), "timings.grow_duration_ms"),
        start_width_px=_coerce_int(timings_raw.get("start_width_px", defaults.start_width_px), "timings.start_width_px"),
        end_width_px=_coerce_int(timings_raw.get("end_width_px", defaults.end_width_px), "timings.end_width_px"),
    )
    theme = validate_theme_tokens(_coerce_table(raw.get("theme", {}), "theme"))
    return QuizConfig(tick_ms=tick_ms, seed=seed, timings=timings, theme=theme)


def _coerce_int(value: object, field_name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer")
    return value


def _coerce_table(value: object, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{field_name} must be a table")
    return value
