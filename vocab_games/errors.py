"""
Exceptions raised by the practice-session engines.

Degenerate pools (too few words for a full set of options) are not errors:
generators return shorter option lists instead.
"""


class VocabGameError(Exception):
    """Base class for engine errors."""
    pass


class EmptyLessonError(VocabGameError):
    """Raised when a session is requested for a lesson with no words."""

    def __init__(self, lesson_id: str):
        self.lesson_id = lesson_id
        super().__init__(f"Lesson {lesson_id!r} has no words to practice")


class SessionCompletedError(VocabGameError):
    """Raised when an answer is submitted to a session that already finished."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id!r} is already completed")


class UnknownGameError(VocabGameError):
    """Raised when no generator is registered for a game type."""
    pass


class InvalidAnswerError(VocabGameError):
    """Raised when an answer cannot be interpreted for the current question."""
    pass
