"""
Practice session state machine.

A Session is an immutable snapshot: every transition (submit_answer,
advance, start_word) returns a new Session built with dataclasses.replace
and leaves the caller's previous value untouched.

States:
    Active     current_index < len(questions)
    Completed  current_index == len(questions)  (terminal)
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Any

from loguru import logger

from vocab_games.config import GameSettings, get_settings
from vocab_games.errors import (
    EmptyLessonError,
    SessionCompletedError,
    UnknownGameError,
    VocabGameError,
)
from vocab_games.games import GameType, get_generator
from vocab_games.games.base import (
    Direction,
    Question,
    ScrambleQuestion,
    TimedChoiceQuestion,
    TypingWord,
)
from vocab_games.games.speed_quiz import answer_bonus
from vocab_games.models import Lesson
from vocab_games.scoring import calculate_wpm


@dataclass(frozen=True)
class AnswerRecord:
    """One graded (or skipped) question."""

    question_id: str
    user_answer: str | None
    correct_answer: str
    is_correct: bool
    skipped: bool = False
    answered_at: datetime | None = None


@dataclass(frozen=True)
class Session:
    """Progress record for one attempt at a practice game."""

    id: str
    lesson_id: str
    game_type: GameType
    questions: tuple[Question, ...]
    start_time: datetime
    current_index: int = 0
    correct_answers: int = 0
    incorrect_answers: int = 0
    end_time: datetime | None = None
    is_completed: bool = False
    time_spent: timedelta | None = None
    answers: tuple[AnswerRecord, ...] = ()

    # true/false, speed quiz
    streak: int = 0
    max_streak: int = 0

    # speed quiz
    bonus_xp: int = 0

    # typing challenge
    mode: Direction | None = None
    total_typing_time: timedelta = timedelta(0)
    words_per_minute: int = 0

    def __post_init__(self):
        assert 0 <= self.current_index <= len(self.questions), "index out of range"
        assert self.is_completed == (self.current_index == len(self.questions)), \
            "completion flag out of sync with index"
        assert self.correct_answers + self.incorrect_answers == self.current_index, \
            "answer counters out of sync with index"
        assert (self.end_time is not None) == self.is_completed, "end_time set while active"
        assert (self.time_spent is not None) == self.is_completed, "time_spent set while active"

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question | None:
        """Question awaiting an answer, or None once completed."""
        if self.is_completed:
            return None
        return self.questions[self.current_index]

    @property
    def hints(self) -> tuple[str, ...]:
        """Hints for the current scrambled word (empty for other games)."""
        question = self.current_question
        if isinstance(question, ScrambleQuestion):
            return question.hints
        return ()


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of submit_answer()."""

    is_correct: bool
    session: Session
    correct_answer: str
    time_spent: timedelta | None = None  # typing challenge, speed quiz
    bonus_xp: int = 0  # speed quiz


def create_session(
    lesson: Lesson,
    game_type: GameType | str,
    count: int | None = None,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
    settings: GameSettings | None = None,
    **options: Any,
) -> Session:
    """
    Start a practice session for a lesson.

    Args:
        lesson: Lesson snapshot to draw words from
        game_type: Which game to generate questions for
        count: Questions wanted; defaults per game, clamped to the lesson size
        rng: Random source (seed it for reproducible sessions)
        now: Start timestamp (defaults to datetime.now())
        settings: Engine settings (defaults to get_settings())
        **options: Game options, e.g. direction= for quiz, mode= for typing,
            time_limit= (seconds) for the speed quiz

    Raises:
        EmptyLessonError: Lesson has no words
        UnknownGameError: No generator for game_type
    """
    if lesson.is_empty:
        raise EmptyLessonError(lesson.id)

    generator = get_generator(game_type)
    if generator is None:
        raise UnknownGameError(f"No generator registered for {game_type!r}")
    game_type = GameType(game_type.lower())

    settings = settings or get_settings()
    rng = rng or random.Random()
    now = now or datetime.now()
    if count is None:
        count = settings.get_question_count(game_type.value)

    questions = tuple(generator.generate(lesson.words, count, rng, settings, **options))
    session_id = f"{game_type.value}-{str(uuid.uuid4())[:8]}"
    logger.info(
        f"New session: {session_id} [Lesson: {lesson.id}, Game: {game_type.value}, "
        f"Questions: {len(questions)}]"
    )

    is_typing = game_type is GameType.TYPING_CHALLENGE
    session = Session(
        id=session_id,
        lesson_id=lesson.id,
        game_type=game_type,
        questions=questions,
        start_time=now,
        mode=questions[0].direction if questions and is_typing else None,
        is_completed=not questions,
        end_time=now if not questions else None,
        time_spent=timedelta(0) if not questions else None,
    )
    return session


def submit_answer(
    session: Session,
    answer: Any,
    *,
    now: datetime | None = None,
    time_spent: timedelta | None = None,
    settings: GameSettings | None = None,
) -> SubmitResult:
    """
    Grade an answer for the current question and move to the next one.

    Args:
        session: Active session
        answer: Selected option, typed text, or a boolean for true/false
        now: Answer timestamp (defaults to datetime.now())
        time_spent: Speed quiz only: time taken on this question; defaults
            to the time since the previous answer (or the session start)
        settings: Engine settings for answer bonuses (defaults to get_settings())

    Raises:
        SessionCompletedError: Session already finished (session unchanged)
        InvalidAnswerError: True/false answer that is not a boolean
    """
    _ensure_active(session)
    now = now or datetime.now()
    question = session.questions[session.current_index]
    is_correct = get_generator(session.game_type).check(question, answer)

    bonus = 0
    if isinstance(question, TimedChoiceQuestion):
        if time_spent is None:
            time_spent = now - _last_answer_time(session)
        bonus = answer_bonus(question, is_correct, session.streak, time_spent,
                             settings or get_settings())
    else:
        time_spent = None

    updated, word_time = _record(session, question, str(answer), is_correct, now, bonus_xp=bonus)
    return SubmitResult(
        is_correct=is_correct,
        session=updated,
        correct_answer=question.correct_answer,
        time_spent=word_time if word_time is not None else time_spent,
        bonus_xp=bonus,
    )


def advance(session: Session, *, now: datetime | None = None) -> Session:
    """
    Skip the current word (scramble/typing "next word").

    The skipped word counts as incorrect so counters keep matching the index.
    """
    _ensure_active(session)
    now = now or datetime.now()
    question = session.questions[session.current_index]
    updated, _ = _record(session, question, None, False, now, skipped=True)
    return updated


def start_word(session: Session, *, now: datetime | None = None) -> Session:
    """Stamp the start time of the current typing-challenge word."""
    _ensure_active(session)
    question = session.questions[session.current_index]
    if not isinstance(question, TypingWord):
        raise VocabGameError(f"start_word() needs a typing session, got {session.game_type.value}")

    stamped = replace(question, start_time=now or datetime.now())
    return replace(session, questions=_replace_at(session.questions, session.current_index, stamped))


def wrong_answers(session: Session) -> list[Question]:
    """Questions answered incorrectly (or skipped), in session order."""
    missed = {record.question_id for record in session.answers if not record.is_correct}
    return [q for q in session.questions if q.id in missed]


def _ensure_active(session: Session) -> None:
    if session.is_completed:
        logger.warning(f"Rejected answer for completed session {session.id}")
        raise SessionCompletedError(session.id)


def _last_answer_time(session: Session) -> datetime:
    if session.answers and session.answers[-1].answered_at is not None:
        return session.answers[-1].answered_at
    return session.start_time


def _replace_at(items: tuple, index: int, value: Any) -> tuple:
    return items[:index] + (value,) + items[index + 1:]


def _record(
    session: Session,
    question: Question,
    user_answer: str | None,
    is_correct: bool,
    now: datetime,
    skipped: bool = False,
    bonus_xp: int = 0,
) -> tuple[Session, timedelta | None]:
    """Apply one graded question and return the next session value."""
    changes: dict[str, Any] = {}
    next_index = session.current_index + 1
    word_time = None

    if isinstance(question, TypingWord):
        start = question.start_time or now
        word_time = now - start
        total_typing_time = session.total_typing_time + word_time
        changes.update(
            questions=_replace_at(
                session.questions,
                session.current_index,
                replace(question, start_time=start, end_time=now,
                        is_correct=is_correct, user_answer=user_answer),
            ),
            total_typing_time=total_typing_time,
            words_per_minute=calculate_wpm(next_index, total_typing_time),
        )

    streak = session.streak + 1 if is_correct else 0
    is_completed = next_index >= len(session.questions)
    if is_completed:
        changes.update(end_time=now, time_spent=now - session.start_time)
        logger.info(
            f"Session {session.id} completed: "
            f"{session.correct_answers + int(is_correct)}/{len(session.questions)} correct"
        )

    updated = replace(
        session,
        current_index=next_index,
        correct_answers=session.correct_answers + int(is_correct),
        incorrect_answers=session.incorrect_answers + int(not is_correct),
        streak=streak,
        max_streak=max(session.max_streak, streak),
        bonus_xp=session.bonus_xp + bonus_xp,
        is_completed=is_completed,
        answers=session.answers + (
            AnswerRecord(
                question_id=question.id,
                user_answer=user_answer,
                correct_answer=question.correct_answer,
                is_correct=is_correct,
                skipped=skipped,
                answered_at=now,
            ),
        ),
        **changes,
    )
    return updated, word_time
