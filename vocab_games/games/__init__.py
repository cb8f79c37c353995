"""
Question generators for the practice games.

Each game (quiz, true/false, typing, etc.) has its own module with:
- generate(): Build the question set for a session
- check(): Grade an answer for one of its questions
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import QuestionGenerator


class GameType(str, Enum):
    """Supported practice games."""
    QUIZ = "quiz"
    LISTENING = "listening"
    FILL_BLANKS = "fill_blanks"
    TRUE_FALSE = "true_false"
    TYPING_CHALLENGE = "typing_challenge"
    WORD_SCRAMBLE = "word_scramble"
    SPEED_QUIZ = "speed_quiz"


# Generator registry - populated by @register decorator
GENERATORS: dict[GameType, "QuestionGenerator"] = {}


def register(game_type: GameType):
    """Decorator to register a question generator."""
    def decorator(cls):
        GENERATORS[game_type] = cls()
        return cls
    return decorator


def get_generator(game_type: str | GameType) -> "QuestionGenerator | None":
    """Get the generator for a game type."""
    if isinstance(game_type, str):
        try:
            game_type = GameType(game_type.lower())
        except ValueError:
            return None
    return GENERATORS.get(game_type)


# Import generators to trigger registration
from . import quiz
from . import listening
from . import fill_blanks
from . import true_false
from . import typing_challenge
from . import word_scramble
from . import speed_quiz

__all__ = [
    "GameType",
    "GENERATORS",
    "get_generator",
    "register",
]
