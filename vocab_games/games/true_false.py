"""
True/False generator.

Shows a Korean word next to a translation. Half the time (by coin flip) the
translation belongs to a different word and the learner should answer False.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from loguru import logger

from vocab_games.config import GameSettings
from vocab_games.errors import InvalidAnswerError
from vocab_games.models import WordPair
from vocab_games.sampling import select_words

from . import GameType, register
from .base import FALSE_INPUTS, TRUE_INPUTS, Question, TrueFalseQuestion


def parse_bool_answer(answer: Any) -> bool:
    """Interpret True/False input (bool or text such as 't', 'false')."""
    if isinstance(answer, bool):
        return answer
    text = str(answer).strip().lower()
    if text in TRUE_INPUTS:
        return True
    if text in FALSE_INPUTS:
        return False
    raise InvalidAnswerError(f"Expected a true/false answer, got {answer!r}")


@register(GameType.TRUE_FALSE)
class TrueFalseGenerator:
    """Generator for true/false translation judgments."""

    def generate(
        self,
        words: Sequence[WordPair],
        count: int,
        rng: random.Random,
        settings: GameSettings,
        **options: Any,
    ) -> list[Question]:
        questions = []
        for index, word in enumerate(select_words(words, count, rng)):
            is_true = rng.random() < 0.5
            displayed = word.english
            if not is_true:
                others = [w for w in words if w.id != word.id]
                if others:
                    displayed = rng.choice(others).english
                # Falls back to a true statement when no different translation exists
                if displayed == word.english:
                    logger.debug(f"No false translation available for {word.korean!r}, using true")
                    is_true = True

            questions.append(
                TrueFalseQuestion(
                    id=f"q-{index}",
                    word=word,
                    correct_answer="true" if is_true else "false",
                    displayed_word=word.korean,
                    displayed_translation=displayed,
                    is_true=is_true,
                    correct_translation=word.english,
                )
            )
        return questions

    def check(self, question: TrueFalseQuestion, answer: Any) -> bool:
        return parse_bool_answer(answer) == question.is_true
