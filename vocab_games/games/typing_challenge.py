"""
Typing challenge generator.

No options: the learner types the answer. Each word carries start/end
timestamps that the session fills in as words are shown and answered,
which feed the words-per-minute score.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from vocab_games.config import GameSettings
from vocab_games.models import WordPair
from vocab_games.sampling import select_words

from . import GameType, register
from .base import Direction, Question, TypingWord, matches


@register(GameType.TYPING_CHALLENGE)
class TypingChallengeGenerator:
    """Generator for typed-answer words."""

    def generate(
        self,
        words: Sequence[WordPair],
        count: int,
        rng: random.Random,
        settings: GameSettings,
        mode: Direction | str = Direction.ENGLISH_TO_KOREAN,
        **options: Any,
    ) -> list[Question]:
        direction = Direction(mode)
        return [
            TypingWord(
                id=f"q-{index}",
                word=word,
                correct_answer=word.answer_for(direction.answer_field),
                direction=direction,
            )
            for index, word in enumerate(select_words(words, count, rng))
        ]

    def check(self, question: TypingWord, answer: Any) -> bool:
        return matches(str(answer), question.correct_answer, question.direction.answer_field)
