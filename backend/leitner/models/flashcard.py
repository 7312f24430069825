from __future__ import annotations

import uuid
from enum import Enum

from pydantic import BaseModel, Field


class AnswerDifficulty(str, Enum):
    WRONG = "wrong"
    HARD = "hard"
    EASY = "easy"


class Flashcard(BaseModel):
    """
    A single flashcard.

    Cards compare and hash by `id`, which is generated per construction, so two cards
    built from the same text are still different members of a bucket.
    """

    front: str
    back: str
    hint: str = ""
    tags: frozenset[str] = frozenset()
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    model_config = {"frozen": True}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flashcard):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class HistoryEntry(BaseModel):
    card: Flashcard
    difficulty: AnswerDifficulty
    timestamp: float  # opaque; never interpreted by the scheduler


# Sparse form: bucket number -> cards in that bucket. Missing keys are empty buckets.
BucketMap = dict[int, set[Flashcard]]

# Dense form: index i holds bucket i, from 0 to the highest bucket number.
BucketSets = list[set[Flashcard]]
