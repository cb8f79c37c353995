"""
Base protocol and types for question generators.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, ClassVar, Protocol

from vocab_games.config import GameSettings
from vocab_games.models import WordPair
from vocab_games.sampling import answer_key


class Direction(str, Enum):
    """Which side of a word pair is shown and which is answered."""

    KOREAN_TO_ENGLISH = "korean-to-english"
    ENGLISH_TO_KOREAN = "english-to-korean"

    @property
    def answer_field(self) -> str:
        return "english" if self is Direction.KOREAN_TO_ENGLISH else "korean"

    @property
    def prompt_field(self) -> str:
        return "korean" if self is Direction.KOREAN_TO_ENGLISH else "english"


# Constants for boolean inputs
TRUE_INPUTS = {"true", "t", "yes", "y", "o"}
FALSE_INPUTS = {"false", "f", "no", "n", "x"}


def matches(answer: str, expected: str, field: str) -> bool:
    """
    Compare a typed or selected answer with the expected value.

    English (translation) answers are trimmed and case-insensitive.
    Korean (native-script) answers are trimmed and must match exactly.
    """
    return answer_key(answer, field) == answer_key(expected, field)


@dataclass(frozen=True)
class Question:
    """Fields shared by every game's question."""

    kind: ClassVar[str] = "question"

    id: str
    word: WordPair
    correct_answer: str


@dataclass(frozen=True)
class ChoiceQuestion(Question):
    """Multiple-choice question (quiz, listening)."""

    kind: ClassVar[str] = "choice"

    prompt: str
    options: tuple[str, ...]
    direction: Direction = Direction.ENGLISH_TO_KOREAN

    def __post_init__(self):
        assert self.correct_answer in self.options, "correct answer missing from options"
        assert len(set(self.options)) == len(self.options), "duplicate options"


@dataclass(frozen=True)
class FillBlanksQuestion(ChoiceQuestion):
    """Cloze sentence with a blank and a set of options."""

    kind: ClassVar[str] = "fill_blanks"

    sentence: str = ""
    blank_position: int = -1


@dataclass(frozen=True)
class TimedChoiceQuestion(ChoiceQuestion):
    """Choice question answered against a time limit (speed quiz)."""

    kind: ClassVar[str] = "timed_choice"

    time_limit: timedelta = timedelta(seconds=10)


@dataclass(frozen=True)
class TrueFalseQuestion(Question):
    """Korean word shown with a translation that may be wrong."""

    kind: ClassVar[str] = "true_false"

    displayed_word: str
    displayed_translation: str
    is_true: bool
    correct_translation: str


@dataclass(frozen=True)
class TypingWord(Question):
    """Per-word record of a typing challenge."""

    kind: ClassVar[str] = "typing"

    direction: Direction = Direction.ENGLISH_TO_KOREAN
    start_time: datetime | None = None
    end_time: datetime | None = None
    is_correct: bool | None = None
    user_answer: str | None = None

    @property
    def prompt(self) -> str:
        return self.word.answer_for(self.direction.prompt_field)

    @property
    def time_spent(self) -> timedelta | None:
        if self.start_time is None or self.end_time is None:
            return None
        return self.end_time - self.start_time


@dataclass(frozen=True)
class ScrambleQuestion(Question):
    """A Korean word with its characters shuffled."""

    kind: ClassVar[str] = "scramble"

    original_word: str
    scrambled_word: str
    hints: tuple[str, ...] = ()


class QuestionGenerator(Protocol):
    """Protocol for per-game question generators."""

    def generate(
        self,
        words: Sequence[WordPair],
        count: int,
        rng: random.Random,
        settings: GameSettings,
        **options: Any,
    ) -> list[Question]:
        """Build up to `count` questions from the lesson words."""
        ...

    def check(self, question: Question, answer: Any) -> bool:
        """Grade an answer against a question produced by generate()."""
        ...
