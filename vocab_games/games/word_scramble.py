"""
Word scramble generator.

Shuffles the characters of each Korean word; the learner types the word
back in its original order. Three progressive hints are attached.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from vocab_games.config import GameSettings
from vocab_games.models import WordPair
from vocab_games.sampling import scramble_word, select_words

from . import GameType, register
from .base import Question, ScrambleQuestion, matches


def make_hints(word: WordPair) -> tuple[str, ...]:
    return (
        f"English: {word.english}",
        f"Length: {len(word.korean)} characters",
        f"First character: {word.korean[:1]}",
    )


@register(GameType.WORD_SCRAMBLE)
class WordScrambleGenerator:
    """Generator for scrambled-word questions."""

    def generate(
        self,
        words: Sequence[WordPair],
        count: int,
        rng: random.Random,
        settings: GameSettings,
        **options: Any,
    ) -> list[Question]:
        return [
            ScrambleQuestion(
                id=f"q-{index}",
                word=word,
                correct_answer=word.korean,
                original_word=word.korean,
                scrambled_word=scramble_word(word.korean, rng),
                hints=make_hints(word),
            )
            for index, word in enumerate(select_words(words, count, rng))
        ]

    def check(self, question: ScrambleQuestion, answer: Any) -> bool:
        return matches(str(answer), question.correct_answer, "korean")

    def hint(self, question: ScrambleQuestion, attempt: int) -> str | None:
        """Progressive hint for attempt N (1-based). Returns None when exhausted."""
        if 1 <= attempt <= len(question.hints):
            return question.hints[attempt - 1]
        return None
