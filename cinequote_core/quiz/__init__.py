"""Movie-quote table and quiz event dispatch."""

from .controller import QuizController, QuizStage, QuizState, QuizTimings
from .quotes import QUOTES, QuoteRecord, masked_quote, quote_at

__all__ = [
    "QUOTES",
    "QuizController",
    "QuizStage",
    "QuizState",
    "QuizTimings",
    "QuoteRecord",
    "masked_quote",
    "quote_at",
]
