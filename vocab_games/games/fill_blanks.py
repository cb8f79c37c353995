"""
Fill-in-the-blank generator.

Wraps each word in a short Korean cloze sentence (with an English gloss)
and offers the word among distractors to fill the blank.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from vocab_games.config import GameSettings
from vocab_games.models import WordPair
from vocab_games.sampling import build_options, select_words

from . import GameType, register
from .base import FillBlanksQuestion, Question, matches

SENTENCE_TEMPLATES = (
    "나는 {blank}을/를 좋아해요. (I like {blank})",
    "이것은 {blank}입니다. (This is {blank})",
    "{blank}을/를 알아요. (I know {blank})",
    "{blank}이/가 좋아요. (I like {blank})",
    "{blank}을/를 먹어요. (I eat {blank})",
    "{blank}이/가 있어요. (I have {blank})",
    "{blank}을/를 봐요. (I see {blank})",
    "{blank}을/를 해요. (I do {blank})",
)


def make_sentence(rng: random.Random, marker: str) -> str:
    """Pick a template at random and insert the blank marker."""
    return rng.choice(SENTENCE_TEMPLATES).format(blank=marker)


@register(GameType.FILL_BLANKS)
class FillBlanksGenerator:
    """Generator for cloze questions."""

    def generate(
        self,
        words: Sequence[WordPair],
        count: int,
        rng: random.Random,
        settings: GameSettings,
        **options: Any,
    ) -> list[Question]:
        marker = settings.blank_marker
        questions = []
        for index, word in enumerate(select_words(words, count, rng)):
            sentence = make_sentence(rng, marker)
            questions.append(
                FillBlanksQuestion(
                    id=f"q-{index}",
                    word=word,
                    correct_answer=word.korean,
                    prompt=word.english,
                    options=build_options(words, word.korean, settings.distractor_count, rng),
                    sentence=sentence,
                    blank_position=sentence.index(marker),
                )
            )
        return questions

    def check(self, question: FillBlanksQuestion, answer: Any) -> bool:
        return matches(str(answer), question.correct_answer, "korean")
