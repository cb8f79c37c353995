"""
Unit tests for the session state machine.

Covers creation, answer submission, skipping, typing timers and the
invariants every session snapshot must hold.
"""

import random
from datetime import timedelta

import pytest

from vocab_games import (
    Direction,
    EmptyLessonError,
    GameType,
    InvalidAnswerError,
    Lesson,
    SessionCompletedError,
    UnknownGameError,
    VocabGameError,
    advance,
    create_session,
    get_stats,
    start_word,
    submit_answer,
    wrong_answers,
)
from vocab_games.games.base import TrueFalseQuestion


def answer_for(question, correct: bool):
    """Build a right or wrong answer for any question type."""
    if isinstance(question, TrueFalseQuestion):
        return question.is_true if correct else not question.is_true
    return question.correct_answer if correct else "__wrong__"


def assert_invariants(session):
    assert 0 <= session.current_index <= len(session.questions)
    assert session.is_completed == (session.current_index == len(session.questions))
    assert session.correct_answers + session.incorrect_answers == session.current_index
    assert (session.end_time is not None) == session.is_completed
    assert (session.time_spent is not None) == session.is_completed


class TestCreateSession:
    """Test session creation."""

    def test_empty_lesson_raises(self):
        with pytest.raises(EmptyLessonError) as exc_info:
            create_session(Lesson(id="empty"), GameType.QUIZ)
        assert exc_info.value.lesson_id == "empty"

    def test_unknown_game_raises(self, five_word_lesson):
        with pytest.raises(UnknownGameError):
            create_session(five_word_lesson, "memory_chain")

    def test_count_clamped_to_lesson_size(self, rng, five_word_lesson):
        """5 unique words, 10 requested: exactly 5 questions with <= 4 options."""
        session = create_session(five_word_lesson, GameType.QUIZ, 10, rng=rng)

        assert len(session.questions) == 5
        assert all(len(q.options) <= 4 for q in session.questions)
        assert session.current_index == 0
        assert not session.is_completed
        assert_invariants(session)

    def test_default_count_from_settings(self, rng, full_lesson):
        session = create_session(full_lesson, GameType.QUIZ, rng=rng)

        assert len(session.questions) == len(full_lesson.words)  # default 10, lesson has 8

    def test_game_type_as_string(self, rng, five_word_lesson):
        session = create_session(five_word_lesson, "Word_Scramble", rng=rng)

        assert session.game_type is GameType.WORD_SCRAMBLE

    def test_zero_questions_is_completed(self, rng, start_time, five_word_lesson):
        session = create_session(five_word_lesson, GameType.QUIZ, 0, rng=rng, now=start_time)

        assert session.questions == ()
        assert session.is_completed
        assert session.time_spent == timedelta(0)
        with pytest.raises(SessionCompletedError):
            submit_answer(session, "anything")

    def test_typing_mode_recorded(self, rng, five_word_lesson):
        session = create_session(
            five_word_lesson, GameType.TYPING_CHALLENGE, mode="korean-to-english", rng=rng
        )

        assert session.mode is Direction.KOREAN_TO_ENGLISH

    @pytest.mark.parametrize("game_type", [GameType.QUIZ, GameType.LISTENING, GameType.FILL_BLANKS])
    def test_mode_is_typing_only(self, rng, five_word_lesson, game_type):
        session = create_session(five_word_lesson, game_type, direction="korean-to-english", rng=rng)

        assert session.mode is None

    def test_seeded_sessions_match(self, full_lesson):
        first = create_session(full_lesson, GameType.FILL_BLANKS, 6, rng=random.Random(11))
        second = create_session(full_lesson, GameType.FILL_BLANKS, 6, rng=random.Random(11))

        assert first.questions == second.questions
        assert first.id != second.id

    def test_session_is_a_lesson_snapshot(self, rng, five_word_lesson):
        session = create_session(five_word_lesson, GameType.QUIZ, rng=rng)

        assert session.lesson_id == five_word_lesson.id
        assert {q.word.id for q in session.questions} <= {w.id for w in five_word_lesson.words}


class TestSubmitAnswer:
    """Test answer submission."""

    def test_correct_answer_advances(self, rng, five_word_lesson):
        session = create_session(five_word_lesson, GameType.QUIZ, rng=rng)
        question = session.current_question

        result = submit_answer(session, question.correct_answer)

        assert result.is_correct is True
        assert result.correct_answer == question.correct_answer
        assert result.session.current_index == 1
        assert result.session.correct_answers == 1
        assert result.session.answers[0].question_id == question.id

    def test_previous_snapshot_untouched(self, rng, five_word_lesson):
        session = create_session(five_word_lesson, GameType.QUIZ, rng=rng)

        result = submit_answer(session, "__wrong__")

        assert result.is_correct is False
        assert session.current_index == 0
        assert session.incorrect_answers == 0
        assert session.answers == ()
        assert result.session.incorrect_answers == 1

    def test_completion_sets_end_time_and_duration(self, rng, start_time, five_word_lesson):
        session = create_session(five_word_lesson, GameType.LISTENING, 2, rng=rng, now=start_time)
        session = submit_answer(session, "x", now=start_time + timedelta(seconds=5)).session
        assert session.end_time is None

        finished = start_time + timedelta(seconds=12)
        session = submit_answer(session, "y", now=finished).session

        assert session.is_completed
        assert session.end_time == finished
        assert session.time_spent == timedelta(seconds=12)
        assert session.current_question is None

    def test_completed_session_rejects_answers(self, rng, one_word_lesson):
        session = create_session(one_word_lesson, GameType.QUIZ, rng=rng)
        session = submit_answer(session, session.current_question.correct_answer).session

        with pytest.raises(SessionCompletedError):
            submit_answer(session, "again")
        assert session.correct_answers == 1
        assert session.incorrect_answers == 0
        assert session.current_index == 1

    def test_invalid_true_false_answer_leaves_session(self, rng, five_word_lesson):
        session = create_session(five_word_lesson, GameType.TRUE_FALSE, rng=rng)

        with pytest.raises(InvalidAnswerError):
            submit_answer(session, "perhaps")
        assert session.current_index == 0

    def test_true_false_streaks(self, rng, lesson_factory):
        session = create_session(lesson_factory(4), GameType.TRUE_FALSE, 4, rng=rng)
        for correct in (True, True, False, True):
            session = submit_answer(session, answer_for(session.current_question, correct)).session

        assert session.streak == 1
        assert session.max_streak == 2
        assert session.correct_answers == 3

    def test_one_word_true_false_always_true(self, one_word_lesson):
        for seed in range(25):
            session = create_session(one_word_lesson, GameType.TRUE_FALSE, 5, rng=random.Random(seed))
            assert len(session.questions) == 1
            assert session.questions[0].is_true is True
            assert submit_answer(session, True).is_correct is True

    @pytest.mark.parametrize("game_type", list(GameType))
    def test_invariants_hold_throughout(self, game_type, full_lesson):
        for seed in range(5):
            rng = random.Random(seed)
            session = create_session(full_lesson, game_type, 6, rng=rng)
            assert_invariants(session)
            while not session.is_completed:
                if game_type is GameType.TYPING_CHALLENGE:
                    session = start_word(session)
                result = submit_answer(session, answer_for(session.current_question, rng.random() < 0.5))
                session = result.session
                assert_invariants(session)
            assert 0 <= get_stats(session).accuracy <= 100

    @pytest.mark.parametrize("pairs,direction", [
        ([("사과", "Apple"), ("능금", "apple")], "korean-to-english"),
        ([("사과", "apple"), ("사과 ", "apple2")], "english-to-korean"),
    ])
    def test_every_other_option_grades_wrong(self, lesson_factory, pairs, direction):
        """Options that look different never grade as the same answer."""
        lesson = lesson_factory(pairs=pairs)
        for seed in range(10):
            session = create_session(lesson, GameType.QUIZ, direction=direction, rng=random.Random(seed))
            while not session.is_completed:
                question = session.current_question
                for option in question.options:
                    if option != question.correct_answer:
                        assert submit_answer(session, option).is_correct is False
                session = submit_answer(session, question.correct_answer).session

    def test_wrong_answers_review(self, rng, five_word_lesson):
        session = create_session(five_word_lesson, GameType.QUIZ, 3, rng=rng)
        missed = session.questions[1]
        for correct in (True, False, True):
            session = submit_answer(session, answer_for(session.current_question, correct)).session

        assert wrong_answers(session) == [missed]


class TestTypingChallenge:
    """Test the per-word typing timers."""

    def test_exact_korean_answer_after_two_seconds(self, start_time, lesson_factory):
        lesson = lesson_factory(pairs=[("사과", "apple")])
        session = create_session(
            lesson, GameType.TYPING_CHALLENGE, mode="english-to-korean", now=start_time
        )
        session = start_word(session, now=start_time)

        result = submit_answer(session, " 사과 ", now=start_time + timedelta(milliseconds=2000))

        assert result.is_correct is True
        assert result.time_spent == timedelta(milliseconds=2000)
        assert result.session.time_spent == timedelta(milliseconds=2000)
        word = result.session.questions[0]
        assert word.end_time == start_time + timedelta(milliseconds=2000)
        assert word.user_answer == " 사과 "
        assert word.is_correct is True

    def test_wpm_uses_per_word_time(self, start_time, lesson_factory):
        """Gaps between words do not count; only the time each word was shown."""
        session = create_session(lesson_factory(3), GameType.TYPING_CHALLENGE, now=start_time)
        clock = start_time
        for _ in range(3):
            clock += timedelta(minutes=5)  # idle before the word is shown
            session = start_word(session, now=clock)
            clock += timedelta(seconds=4)
            session = submit_answer(session, session.current_question.correct_answer, now=clock).session

        assert session.total_typing_time == timedelta(seconds=12)
        assert session.words_per_minute == 15

    def test_unstarted_word_counts_zero_time(self, start_time, lesson_factory):
        session = create_session(lesson_factory(2), GameType.TYPING_CHALLENGE, now=start_time)

        result = submit_answer(session, "x", now=start_time + timedelta(seconds=30))

        assert result.time_spent == timedelta(0)
        assert result.session.words_per_minute == 0

    def test_start_word_requires_typing_session(self, rng, five_word_lesson):
        session = create_session(five_word_lesson, GameType.QUIZ, rng=rng)

        with pytest.raises(VocabGameError):
            start_word(session)

    def test_start_word_returns_new_snapshot(self, start_time, five_word_lesson):
        session = create_session(five_word_lesson, GameType.TYPING_CHALLENGE, now=start_time)

        started = start_word(session, now=start_time)

        assert session.questions[0].start_time is None
        assert started.questions[0].start_time == start_time


class TestSpeedQuiz:
    """Test per-answer timing and bonuses in the speed quiz."""

    def test_quick_correct_answer_earns_bonus(self, rng, start_time, five_word_lesson):
        session = create_session(five_word_lesson, GameType.SPEED_QUIZ, rng=rng, now=start_time)
        question = session.current_question

        result = submit_answer(session, question.correct_answer,
                               now=start_time + timedelta(seconds=3))

        assert result.is_correct is True
        assert result.time_spent == timedelta(seconds=3)
        assert result.bonus_xp == 5
        assert result.session.bonus_xp == 5

    def test_explicit_time_spent_wins(self, rng, start_time, five_word_lesson):
        session = create_session(five_word_lesson, GameType.SPEED_QUIZ, rng=rng, now=start_time)

        result = submit_answer(session, session.current_question.correct_answer,
                               now=start_time + timedelta(seconds=1),
                               time_spent=timedelta(seconds=8))

        assert result.time_spent == timedelta(seconds=8)
        assert result.bonus_xp == 0

    def test_time_measured_from_previous_answer(self, rng, start_time, five_word_lesson):
        session = create_session(five_word_lesson, GameType.SPEED_QUIZ, rng=rng, now=start_time)
        session = submit_answer(session, "__wrong__", now=start_time + timedelta(seconds=30)).session

        result = submit_answer(session, session.current_question.correct_answer,
                               now=start_time + timedelta(seconds=32))

        assert result.time_spent == timedelta(seconds=2)
        assert result.bonus_xp == 5

    def test_wrong_answer_earns_nothing(self, rng, start_time, five_word_lesson):
        session = create_session(five_word_lesson, GameType.SPEED_QUIZ, rng=rng, now=start_time)

        result = submit_answer(session, "__wrong__", now=start_time + timedelta(seconds=1))

        assert result.bonus_xp == 0
        assert result.session.streak == 0

    def test_hot_streak_bonus(self, rng, start_time, full_lesson):
        """The sixth correct answer in a row extends a five-answer streak."""
        session = create_session(full_lesson, GameType.SPEED_QUIZ, 6, rng=rng, now=start_time,
                                 time_limit=10)
        bonuses = []
        for _ in range(6):
            result = submit_answer(session, session.current_question.correct_answer,
                                   time_spent=timedelta(seconds=8))
            bonuses.append(result.bonus_xp)
            session = result.session

        assert bonuses == [0, 0, 0, 0, 0, 10]
        assert session.max_streak == 6
        assert session.mode is None


class TestAdvance:
    """Test skipping to the next word."""

    def test_skip_counts_as_incorrect(self, rng, five_word_lesson):
        session = create_session(five_word_lesson, GameType.WORD_SCRAMBLE, 2, rng=rng)
        first_hints = session.hints

        session = advance(session)

        assert first_hints[0].startswith("English: ")
        assert session.current_index == 1
        assert session.incorrect_answers == 1
        assert session.answers[0].skipped is True
        assert session.hints == session.questions[1].hints

    def test_skip_last_word_completes(self, rng, start_time, one_word_lesson):
        session = create_session(one_word_lesson, GameType.WORD_SCRAMBLE, rng=rng, now=start_time)

        session = advance(session, now=start_time + timedelta(seconds=3))

        assert session.is_completed
        assert session.time_spent == timedelta(seconds=3)
        assert session.hints == ()
        with pytest.raises(SessionCompletedError):
            advance(session)
