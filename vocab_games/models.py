"""
Lesson data models.

Lessons arrive from the external storage layer as plain records; these
models validate them once and freeze them so a session always works on a
snapshot of the words it was created from.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WordPair(BaseModel):
    """A single Korean/English vocabulary entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    korean: str
    english: str
    context_sentence: str | None = Field(default=None, alias="contextSentence")

    def answer_for(self, field: str) -> str:
        """Value of the 'korean' or 'english' side."""
        return self.english if field == "english" else self.korean


class Lesson(BaseModel):
    """A named, ordered collection of word pairs."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    words: tuple[WordPair, ...] = ()
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @property
    def is_empty(self) -> bool:
        return not self.words
