from __future__ import annotations

from typing import Literal


QuizMessage = Literal[
    "reveal_hint",
    "show_answer",
    "next_quote",
    "noop",
]

QUIZ_MESSAGES: tuple[QuizMessage, ...] = (
    "reveal_hint",
    "show_answer",
    "next_quote",
    "noop",
)


def parse_quiz_message(raw: object) -> QuizMessage | None:
    """Parse a host-supplied click payload into a typed quiz message.

    Hosts echo back whatever string was attached to the element (`data-message` for the
    HTML host), so case, surrounding whitespace and dashes are tolerated.
    """

    if not isinstance(raw, str):
        return None
    value = raw.strip().lower().replace("-", "_")
    for message in QUIZ_MESSAGES:
        if value == message:
            return message
    return None
