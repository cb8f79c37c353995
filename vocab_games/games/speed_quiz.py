"""
Speed quiz generator.

Multiple choice in mixed directions: each question flips a coin between
Korean -> English and English -> Korean. Questions carry a time limit
that never cuts an answer off; it only decides the quick-answer bonus.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from datetime import timedelta
from typing import Any

from vocab_games.config import GameSettings
from vocab_games.errors import VocabGameError
from vocab_games.models import WordPair
from vocab_games.sampling import build_options, select_words

from . import GameType, register
from .base import Direction, Question, TimedChoiceQuestion, matches


@register(GameType.SPEED_QUIZ)
class SpeedQuizGenerator:
    """Generator for timed, mixed-direction choice questions."""

    def generate(
        self,
        words: Sequence[WordPair],
        count: int,
        rng: random.Random,
        settings: GameSettings,
        time_limit: float | None = None,
        **options: Any,
    ) -> list[Question]:
        seconds = settings.speed_quiz_time_limit if time_limit is None else time_limit
        if seconds <= 0:
            raise VocabGameError(f"time_limit must be positive, got {seconds}")
        limit = timedelta(seconds=seconds)

        questions = []
        for index, word in enumerate(select_words(words, count, rng)):
            direction = (
                Direction.KOREAN_TO_ENGLISH if rng.random() < 0.5 else Direction.ENGLISH_TO_KOREAN
            )
            correct = word.answer_for(direction.answer_field)
            questions.append(
                TimedChoiceQuestion(
                    id=f"q-{index}",
                    word=word,
                    correct_answer=correct,
                    prompt=word.answer_for(direction.prompt_field),
                    options=build_options(
                        words, correct, settings.distractor_count, rng, direction.answer_field
                    ),
                    direction=direction,
                    time_limit=limit,
                )
            )
        return questions

    def check(self, question: TimedChoiceQuestion, answer: Any) -> bool:
        return matches(str(answer), question.correct_answer, question.direction.answer_field)


def answer_bonus(
    question: TimedChoiceQuestion,
    is_correct: bool,
    streak: int,
    answer_time: timedelta,
    settings: GameSettings,
) -> int:
    """
    Bonus XP for one speed-quiz answer.

    Only correct answers earn a bonus:
    - quick answer: answered in under quick_answer_ratio of the time limit
    - hot streak: the streak before this answer already reached hot_streak_length
    """
    if not is_correct:
        return 0
    bonus = 0
    if answer_time < question.time_limit * settings.quick_answer_ratio:
        bonus += settings.quick_answer_bonus
    if streak >= settings.hot_streak_length:
        bonus += settings.hot_streak_bonus
    return bonus
