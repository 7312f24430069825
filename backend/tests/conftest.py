"""
Shared fixtures for scheduler tests.

Provides:
- A handful of flashcards
- A sparse bucket map spread over buckets 0, 1 and 3
- Bucket validation toggled on for a single test
"""

import pytest

from leitner.config import settings
from leitner.models import Flashcard


@pytest.fixture
def cards() -> list[Flashcard]:
    return [
        Flashcard(front=f"Q{i}", back=f"A{i}", hint=f"H{i}", tags={"test"})
        for i in range(1, 6)
    ]


@pytest.fixture
def buckets(cards):
    c1, c2, c3, c4, _ = cards
    return {0: {c1}, 1: {c2, c3}, 3: {c4}}


@pytest.fixture
def strict_buckets(monkeypatch):
    """Turn on bucket map validation for the duration of a test."""
    monkeypatch.setattr(settings, "validate_buckets", True)
