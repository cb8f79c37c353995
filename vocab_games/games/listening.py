"""
Listening practice generator.

The Korean word is played aloud by the presentation layer; the learner
picks the matching Korean spelling from the options.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from vocab_games.config import GameSettings
from vocab_games.models import WordPair

from . import GameType, register
from .base import ChoiceQuestion, Direction, Question, matches
from .quiz import build_choice_questions


@register(GameType.LISTENING)
class ListeningGenerator:
    """Generator for listening recognition questions."""

    def generate(
        self,
        words: Sequence[WordPair],
        count: int,
        rng: random.Random,
        settings: GameSettings,
        **options: Any,
    ) -> list[Question]:
        # Prompt is the spoken Korean word itself
        return build_choice_questions(
            words,
            count,
            rng,
            settings.distractor_count,
            Direction.ENGLISH_TO_KOREAN,
            prompt_field="korean",
        )

    def check(self, question: ChoiceQuestion, answer: Any) -> bool:
        return matches(str(answer), question.correct_answer, "korean")
