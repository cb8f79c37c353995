"""
Setup script for vocab-games.

vocab-games is the practice-session core for Korean/English vocabulary
lessons. It serves three roles:

1. Question generation - quiz, listening, fill-in-the-blank, true/false,
   typing challenge and word scramble sets from any lesson size
2. Session state - immutable snapshots advanced one answer at a time
3. Scoring - accuracy, streaks, words per minute and XP for any UI
"""

from setuptools import find_packages, setup

setup(
    name="vocab-games",
    version="0.1.0",
    description="Practice-session engines for Korean/English vocabulary lessons",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="vocabulary korean quiz learning education",
)
