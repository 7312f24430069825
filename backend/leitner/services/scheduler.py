"""
Modified-Leitner bucket scheduler.

Operations:
  to_bucket_sets: sparse bucket map -> dense list of bucket sets
  get_bucket_range: first and last occupied bucket of the dense form
  practice: cards due on a given day
  update: re-file a card after an answer, returning a new bucket map
  compute_progress: summary statistics over a bucket map
  get_hint: hint text for the front of a card

None of these mutate the bucket map or sets passed in. Callers sharing one map
across threads must serialize writers themselves.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from leitner.config import settings
from leitner.models.flashcard import (
    AnswerDifficulty,
    BucketMap,
    BucketSets,
    Flashcard,
    HistoryEntry,
)
from leitner.models.progress import BucketRange, ProgressStats

logger = logging.getLogger(__name__)

MASTERED_BUCKET = 2  # lowest bucket counted as mastered
STRUGGLING_BUCKET = 0


class InvalidDifficultyError(ValueError):
    """Raised when an answer difficulty is not one of Wrong, Hard or Easy."""


class MalformedBucketsError(ValueError):
    """Raised when a bucket map has a bad key or a card filed in two buckets."""


def validate_buckets(buckets: BucketMap) -> None:
    """Check that keys are non-negative ints and no card sits in more than one bucket."""
    seen: dict[Flashcard, int] = {}
    for bucket_num, cards in buckets.items():
        if isinstance(bucket_num, bool) or not isinstance(bucket_num, int) or bucket_num < 0:
            raise MalformedBucketsError(f"Invalid bucket number: {bucket_num!r}")
        for card in cards:
            if card in seen:
                raise MalformedBucketsError(
                    f"Card {card.id} is in buckets {seen[card]} and {bucket_num}"
                )
            seen[card] = bucket_num


def _check(buckets: BucketMap) -> None:
    if settings.validate_buckets:
        validate_buckets(buckets)


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Convert a bucket map into a list where index i is the set of cards in bucket i.

    Missing buckets become fresh empty sets. Present buckets are the caller's own
    set objects, not copies.
    """
    _check(buckets)
    if not buckets:
        return []

    max_bucket = max(buckets)
    result: BucketSets = [set() for _ in range(max_bucket + 1)]
    for bucket_num, cards in buckets.items():
        result[bucket_num] = cards
    return result


def get_bucket_range(bucket_sets: Sequence[set[Flashcard]]) -> BucketRange | None:
    """Return the first and last non-empty bucket, or None if every bucket is empty."""
    min_bucket: int | None = None
    max_bucket: int | None = None
    for i, cards in enumerate(bucket_sets):
        if cards:
            if min_bucket is None:
                min_bucket = i
            max_bucket = i

    if min_bucket is None or max_bucket is None:
        return None
    return BucketRange(min_bucket=min_bucket, max_bucket=max_bucket)


def practice(bucket_sets: Sequence[set[Flashcard]], day: int) -> set[Flashcard]:
    """
    Return the cards to practice on `day` (0-based).

    Only the bucket whose number equals the day is due. Days past the last bucket
    have nothing due. The result is always a new set.
    """
    if 0 <= day < len(bucket_sets):
        return set(bucket_sets[day])
    return set()


def _destination(difficulty: AnswerDifficulty, current: int | None) -> int:
    if difficulty is AnswerDifficulty.WRONG:
        return 0
    if current is None:
        # Unseen cards start in bucket 0 whatever the answer
        return 0
    if difficulty is AnswerDifficulty.HARD:
        return current
    return current + 1


def update(
    buckets: BucketMap,
    card: Flashcard,
    difficulty: AnswerDifficulty | str,
) -> BucketMap:
    """
    Re-file `card` according to how it was answered.

    Wrong sends the card to bucket 0, Hard keeps it where it is and Easy moves it up
    one bucket. A card not yet in any bucket goes to bucket 0.

    Returns a new bucket map; `buckets` and its sets are left as they were.
    Raises InvalidDifficultyError for an unknown difficulty.
    """
    try:
        difficulty = AnswerDifficulty(difficulty)
    except ValueError as e:
        logger.warning("Rejected difficulty %r for card %s", difficulty, card.id)
        raise InvalidDifficultyError(f"Unknown answer difficulty: {difficulty!r}") from e

    _check(buckets)
    new_buckets: BucketMap = {
        bucket_num: set(cards) for bucket_num, cards in buckets.items()
    }

    current: int | None = None
    for bucket_num, cards in new_buckets.items():
        if card in cards:
            current = bucket_num
            cards.discard(card)
            break

    target = _destination(difficulty, current)
    new_buckets.setdefault(target, set()).add(card)

    logger.debug(
        "Card %s moved from bucket %s to %s (%s)",
        card.id, current, target, difficulty.value,
    )
    return new_buckets


def compute_progress(
    buckets: BucketMap,
    history: Sequence[HistoryEntry],
) -> ProgressStats:
    """
    Summarize learning progress for a bucket map.

    `history` is part of the signature but does not feed into any statistic.
    """
    _check(buckets)
    total_cards = 0
    total_bucket_sum = 0
    for cards in buckets.values():
        total_cards += len(cards)
        for card in cards:
            for bucket_num, other in buckets.items():
                if card in other:
                    total_bucket_sum += bucket_num
                    break

    mastered_cards = sum(
        len(cards) for bucket_num, cards in buckets.items()
        if bucket_num >= MASTERED_BUCKET
    )
    struggling_cards = len(buckets.get(STRUGGLING_BUCKET, ()))
    average_bucket = total_bucket_sum / total_cards if total_cards > 0 else 0.0

    return ProgressStats(
        total_cards=total_cards,
        mastered_cards=mastered_cards,
        struggling_cards=struggling_cards,
        average_bucket=average_bucket,
    )


def get_hint(card: Flashcard) -> str:
    """Return the first letter of the answer, or "" if the card has no answer or no hint."""
    if not card.back or not card.hint:
        return ""
    return card.back[0]
