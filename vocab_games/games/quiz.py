"""
Multiple-choice quiz generator.

- Shows one side of a word pair and asks for the other.
- Default direction shows English and asks for Korean; the reverse
  direction shows Korean and asks for English.
- Options are the correct answer plus up to N distractors from the lesson.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from vocab_games.config import GameSettings
from vocab_games.models import WordPair
from vocab_games.sampling import build_options, select_words

from . import GameType, register
from .base import ChoiceQuestion, Direction, Question, matches


def build_choice_questions(
    words: Sequence[WordPair],
    count: int,
    rng: random.Random,
    distractor_count: int,
    direction: Direction,
    prompt_field: str | None = None,
) -> list[ChoiceQuestion]:
    """Sample words and attach shuffled options drawn from the whole lesson."""
    answer_field = direction.answer_field
    prompt_field = prompt_field or direction.prompt_field
    questions = []
    for index, word in enumerate(select_words(words, count, rng)):
        correct = word.answer_for(answer_field)
        questions.append(
            ChoiceQuestion(
                id=f"q-{index}",
                word=word,
                correct_answer=correct,
                prompt=word.answer_for(prompt_field),
                options=build_options(words, correct, distractor_count, rng, answer_field),
                direction=direction,
            )
        )
    return questions


@register(GameType.QUIZ)
class QuizGenerator:
    """Generator for multiple-choice quiz questions."""

    def generate(
        self,
        words: Sequence[WordPair],
        count: int,
        rng: random.Random,
        settings: GameSettings,
        direction: Direction | str = Direction.ENGLISH_TO_KOREAN,
        **options: Any,
    ) -> list[Question]:
        return build_choice_questions(
            words, count, rng, settings.distractor_count, Direction(direction)
        )

    def check(self, question: ChoiceQuestion, answer: Any) -> bool:
        """Selected option must equal the correct answer (rules per answer side)."""
        return matches(str(answer), question.correct_answer, question.direction.answer_field)
