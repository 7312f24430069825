from leitner.models.flashcard import (
    AnswerDifficulty,
    BucketMap,
    BucketSets,
    Flashcard,
    HistoryEntry,
)
from leitner.models.progress import BucketRange, ProgressStats

__all__ = [
    "AnswerDifficulty",
    "BucketMap",
    "BucketRange",
    "BucketSets",
    "Flashcard",
    "HistoryEntry",
    "ProgressStats",
]
