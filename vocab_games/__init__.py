"""
vocab-games
===========

Practice-session engines for Korean/English vocabulary lessons:
multiple-choice quiz, listening, fill-in-the-blank, true/false,
typing challenge, word scramble and speed quiz.

Typical flow:

    session = create_session(lesson, GameType.QUIZ, 10, rng=random.Random(7))
    while not session.is_completed:
        result = submit_answer(session, user_choice)
        session = result.session
    stats = get_stats(session)
"""

from vocab_games.config import GameSettings, get_settings
from vocab_games.errors import (
    EmptyLessonError,
    InvalidAnswerError,
    SessionCompletedError,
    UnknownGameError,
    VocabGameError,
)
from vocab_games.games import GameType, get_generator
from vocab_games.games.base import (
    ChoiceQuestion,
    Direction,
    FillBlanksQuestion,
    Question,
    ScrambleQuestion,
    TimedChoiceQuestion,
    TrueFalseQuestion,
    TypingWord,
)
from vocab_games.log import configure_logging
from vocab_games.models import Lesson, WordPair
from vocab_games.sampling import pick_distractors, scramble_word, select_words
from vocab_games.scoring import (
    GameStats,
    XPProgress,
    get_stats,
    level_for_xp,
    xp_for_next_level,
    xp_progress,
)
from vocab_games.session import (
    AnswerRecord,
    Session,
    SubmitResult,
    advance,
    create_session,
    start_word,
    submit_answer,
    wrong_answers,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config / logging
    "GameSettings", "get_settings", "configure_logging",
    # errors
    "VocabGameError", "EmptyLessonError", "SessionCompletedError",
    "UnknownGameError", "InvalidAnswerError",
    # models
    "Lesson", "WordPair",
    # games
    "GameType", "Direction", "get_generator",
    "Question", "ChoiceQuestion", "FillBlanksQuestion", "TrueFalseQuestion",
    "TypingWord", "ScrambleQuestion", "TimedChoiceQuestion",
    # sampling
    "select_words", "pick_distractors", "scramble_word",
    # session
    "Session", "SubmitResult", "AnswerRecord",
    "create_session", "submit_answer", "advance", "start_word", "wrong_answers",
    # scoring
    "GameStats", "XPProgress", "get_stats",
    "level_for_xp", "xp_for_next_level", "xp_progress",
]
