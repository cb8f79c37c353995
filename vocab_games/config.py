"""
Configuration settings for vocab-games.

Uses Pydantic Settings for environment variable management with .env file support.
Scoring constants live here so they stay table-driven and overridable.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """Engine settings loaded from environment variables (VOCAB_GAMES_*)."""

    model_config = SettingsConfigDict(
        env_prefix="VOCAB_GAMES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Question generation
    # ========================================
    distractor_count: int = Field(
        default=3,
        ge=0,
        description="Wrong options offered alongside the correct one",
    )
    blank_marker: str = Field(
        default="___",
        description="Marker substituted for the missing word in cloze sentences",
    )

    # ─── Default question counts per game ──────────────────────────────────────
    default_question_counts: dict[str, int] = Field(
        default={
            "quiz": 10,
            "listening": 15,
            "fill_blanks": 10,
            "true_false": 20,
            "typing_challenge": 20,
            "word_scramble": 10,
            "speed_quiz": 15,
        },
        description="Questions per session when the caller does not ask for a count",
    )

    # ========================================
    # Scoring
    # ========================================
    xp_per_correct: dict[str, int] = Field(
        default={
            "quiz": 10,
            "listening": 15,
            "fill_blanks": 20,
            "true_false": 8,
            "typing_challenge": 12,
            "word_scramble": 15,
            "speed_quiz": 10,
        },
        description="XP multiplier applied to correct answers, per game",
    )
    streak_bonus_rate: int = Field(
        default=2,
        description="XP per point of max streak (true/false)",
    )
    # Checked highest first; a WPM strictly above the threshold earns the bonus
    typing_speed_tiers: list[tuple[int, int]] = Field(
        default=[(30, 20), (20, 10)],
        description="(wpm_threshold, bonus_xp) pairs for the typing challenge",
    )

    # ─── Speed quiz ────────────────────────────────────────────────────────────
    speed_quiz_time_limit: float = Field(
        default=10.0,
        gt=0,
        description="Seconds per speed-quiz question (scoring only, never enforced)",
    )
    quick_answer_ratio: float = Field(
        default=0.5,
        gt=0,
        le=1,
        description="Fraction of the time limit a correct answer must beat for the quick bonus",
    )
    quick_answer_bonus: int = Field(
        default=5,
        description="XP for a correct answer faster than quick_answer_ratio x time limit",
    )
    hot_streak_length: int = Field(
        default=5,
        ge=1,
        description="Streak that must already be running for the hot-streak bonus",
    )
    hot_streak_bonus: int = Field(
        default=10,
        description="XP for each correct answer extending a hot streak",
    )
    speed_quiz_streak_rate: int = Field(
        default=5,
        description="XP per point of max streak at the end of a speed quiz",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    def get_question_count(self, game_type: str) -> int:
        """Default session length for a game."""
        return self.default_question_counts.get(game_type, 10)

    def get_xp_rate(self, game_type: str) -> int:
        """XP earned per correct answer for a game."""
        return self.xp_per_correct.get(game_type, 0)

    def get_speed_bonus(self, words_per_minute: int) -> int:
        """Bonus XP for a typing speed, using the highest tier passed."""
        for threshold, bonus in sorted(self.typing_speed_tiers, reverse=True):
            if words_per_minute > threshold:
                return bonus
        return 0


@lru_cache(maxsize=1)
def get_settings() -> GameSettings:
    """Get cached settings instance."""
    return GameSettings()
