"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from vocab_games import Lesson, WordPair  # noqa: E402


SAMPLE_WORDS = [
    ("안녕", "hello"),
    ("사과", "apple"),
    ("물", "water"),
    ("학교", "school"),
    ("고양이", "cat"),
    ("강아지", "dog"),
    ("책", "book"),
    ("친구", "friend"),
]


def make_lesson(count: int = 5, lesson_id: str = "lesson-1", pairs=None) -> Lesson:
    """Build a lesson from the first `count` sample words (or explicit pairs)."""
    pairs = pairs if pairs is not None else SAMPLE_WORDS[:count]
    return Lesson(
        id=lesson_id,
        name="Test lesson",
        words=[
            WordPair(id=f"w-{i}", korean=korean, english=english)
            for i, (korean, english) in enumerate(pairs)
        ],
    )


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def rng():
    """Seeded random source for reproducible sessions."""
    return random.Random(1234)


@pytest.fixture
def start_time():
    return datetime(2024, 5, 1, 9, 0, 0)


@pytest.fixture
def five_word_lesson():
    return make_lesson(5)


@pytest.fixture
def one_word_lesson():
    return make_lesson(1)


@pytest.fixture
def full_lesson():
    return make_lesson(len(SAMPLE_WORDS))


@pytest.fixture
def lesson_factory():
    """Factory for lessons of a given size or with explicit word pairs."""
    return make_lesson
