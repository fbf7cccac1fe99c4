from .clock import TickClock
from .config import QuizConfig, load_config, parse_config
from .runtime import QuizRunResult, QuizRuntime, parse_script

__all__ = [
    "QuizConfig",
    "QuizRunResult",
    "QuizRuntime",
    "TickClock",
    "load_config",
    "parse_config",
    "parse_script",
]
