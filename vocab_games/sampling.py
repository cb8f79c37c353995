"""
Sampling primitives shared by every game.

All randomness comes from an explicitly passed random.Random so a seeded
generator reproduces the same words, options and scrambles.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from loguru import logger

from vocab_games.models import WordPair

T = TypeVar("T")


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a shuffled copy, leaving the input untouched."""
    result = list(items)
    rng.shuffle(result)
    return result


def select_words(words: Sequence[WordPair], count: int, rng: random.Random) -> list[WordPair]:
    """
    Pick a shuffled, duplicate-free subset of min(count, len(words)) words.

    Empty input gives empty output; callers decide whether that is an error.
    """
    if not words or count <= 0:
        return []
    return rng.sample(list(words), min(count, len(words)))


def answer_key(value: str, field: str) -> str:
    """
    Comparison key for an answer value.

    English values are trimmed and case-folded; Korean values are trimmed.
    Two values with the same key grade as the same answer.
    """
    if field == "english":
        return value.strip().casefold()
    return value.strip()


def pick_distractors(
    pool: Sequence[WordPair],
    correct: str,
    count: int,
    rng: random.Random,
    field: str = "korean",
) -> list[str]:
    """
    Choose up to `count` unique wrong answers from the pool.

    Values are deduplicated on their answer_key() and anything that would
    grade the same as `correct` is dropped. A small pool yields fewer
    distractors rather than an error.
    """
    excluded = answer_key(correct, field)
    by_key: dict[str, str] = {}
    for word in pool:
        value = word.answer_for(field)
        key = answer_key(value, field)
        if key != excluded:
            by_key.setdefault(key, value)
    candidates = list(by_key.values())
    if len(candidates) < count:
        logger.debug(
            f"Only {len(candidates)} distractors available for {correct!r} (wanted {count})"
        )
    return rng.sample(candidates, min(max(count, 0), len(candidates)))


def build_options(
    pool: Sequence[WordPair],
    correct: str,
    count: int,
    rng: random.Random,
    field: str = "korean",
) -> tuple[str, ...]:
    """Correct answer plus distractors, shuffled."""
    return tuple(shuffled([correct, *pick_distractors(pool, correct, count, rng, field)], rng))


def scramble_word(word: str, rng: random.Random) -> str:
    """
    Shuffle the characters of a word so it differs from the original.

    Words of length <= 1, or made of a single repeated character, have no
    distinct permutation and come back unchanged.
    """
    chars = list(word)
    rng.shuffle(chars)
    if len(chars) > 1 and "".join(chars) == word:
        # Swap the first character with the first one that differs from it
        for j in range(1, len(chars)):
            if chars[j] != chars[0]:
                chars[0], chars[j] = chars[j], chars[0]
                break
    return "".join(chars)
