"""
Scoring Engine for practice sessions.

Turns the final counters of a session into a summary:
- accuracy (0-100)
- XP: per-game rate x correct answers, plus game bonuses
  (true/false streak bonus, typing speed bonus, speed quiz streak and
  per-answer bonuses)
- words per minute for the typing challenge

Also holds the XP -> level progression rules used by dashboards.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import TYPE_CHECKING

from vocab_games.config import GameSettings, get_settings
from vocab_games.games import GameType

if TYPE_CHECKING:
    from vocab_games.session import Session


# Level thresholds: reaching LEVEL_THRESHOLDS[i] XP means level i + 2
LEVEL_THRESHOLDS = (100, 250, 450, 700, 1000)


@dataclass(frozen=True)
class GameStats:
    """Summary of a finished session."""

    correct_answers: int
    incorrect_answers: int
    total: int
    accuracy: float  # 0-100
    xp_earned: int
    time_spent: timedelta
    max_streak: int | None = None
    words_per_minute: int | None = None
    avg_time_per_word: timedelta | None = None
    total_typing_time: timedelta | None = None
    bonus_xp: int | None = None


@dataclass(frozen=True)
class XPProgress:
    """XP gained inside the current level."""

    current: int
    needed: int
    percentage: float


def calculate_accuracy(correct: int, total: int) -> float:
    """Percentage of correct answers; 0 for an empty session."""
    return 100 * correct / total if total > 0 else 0.0


def calculate_wpm(words_completed: int, elapsed: timedelta) -> int:
    """
    Words per minute over the summed per-word typing time.

    Rounds half up; 0 when no time has been recorded.
    """
    minutes = elapsed.total_seconds() / 60
    if minutes <= 0:
        return 0
    return math.floor(words_completed / minutes + 0.5)


def _streak_bonus(session: Session, settings: GameSettings) -> int:
    return session.max_streak * settings.streak_bonus_rate


def _speed_bonus(session: Session, settings: GameSettings) -> int:
    return settings.get_speed_bonus(session.words_per_minute)


def _speed_quiz_bonus(session: Session, settings: GameSettings) -> int:
    return session.max_streak * settings.speed_quiz_streak_rate + session.bonus_xp


# Extra XP on top of the per-correct rate
BONUS_RULES: dict[GameType, Callable[[Session, GameSettings], int]] = {
    GameType.TRUE_FALSE: _streak_bonus,
    GameType.TYPING_CHALLENGE: _speed_bonus,
    GameType.SPEED_QUIZ: _speed_quiz_bonus,
}


def calculate_xp(session: Session, settings: GameSettings | None = None) -> int:
    """XP for a session: rate x correct answers plus any game bonus."""
    settings = settings or get_settings()
    base_xp = session.correct_answers * settings.get_xp_rate(session.game_type.value)
    bonus = BONUS_RULES.get(session.game_type)
    return base_xp + (bonus(session, settings) if bonus else 0)


def get_stats(session: Session, settings: GameSettings | None = None) -> GameStats:
    """
    Summarize a session, normally once it is completed.

    Rate metrics are only filled in for the games that track them.
    """
    settings = settings or get_settings()
    total = session.correct_answers + session.incorrect_answers

    stats = GameStats(
        correct_answers=session.correct_answers,
        incorrect_answers=session.incorrect_answers,
        total=total,
        accuracy=calculate_accuracy(session.correct_answers, total),
        xp_earned=calculate_xp(session, settings),
        time_spent=session.time_spent or timedelta(0),
    )

    if session.game_type is GameType.TRUE_FALSE:
        return replace(stats, max_streak=session.max_streak)
    if session.game_type is GameType.SPEED_QUIZ:
        return replace(stats, max_streak=session.max_streak, bonus_xp=session.bonus_xp)
    if session.game_type is GameType.TYPING_CHALLENGE:
        return replace(
            stats,
            words_per_minute=session.words_per_minute,
            avg_time_per_word=session.total_typing_time / total if total else timedelta(0),
            total_typing_time=session.total_typing_time,
        )
    return stats


# ========================================
# Level progression
# ========================================


def level_for_xp(total_xp: int) -> int:
    """
    Level reached with a given XP total.

    Levels 1-6 use fixed thresholds (100/250/450/700/1000);
    beyond that level = floor(sqrt(xp / 100)) + 1.
    """
    for level, threshold in enumerate(LEVEL_THRESHOLDS, start=1):
        if total_xp < threshold:
            return level
    # Never drop below the last fixed level
    return max(len(LEVEL_THRESHOLDS) + 1, math.floor(math.sqrt(total_xp / 100)) + 1)


def xp_for_next_level(level: int) -> int:
    """Total XP needed to leave `level`."""
    if 1 <= level <= len(LEVEL_THRESHOLDS):
        return LEVEL_THRESHOLDS[level - 1]
    return level ** 2 * 100


def xp_progress(level: int, total_xp: int) -> XPProgress:
    """Progress from the start of `level` toward the next one."""
    floor_xp = 0 if level == 1 else xp_for_next_level(level - 1)
    current = total_xp - floor_xp
    needed = xp_for_next_level(level) - floor_xp
    return XPProgress(
        current=current,
        needed=needed,
        percentage=min(100.0, current / needed * 100) if needed > 0 else 100.0,
    )
