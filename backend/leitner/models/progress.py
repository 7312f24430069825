from pydantic import BaseModel


class BucketRange(BaseModel):
    min_bucket: int
    max_bucket: int


class ProgressStats(BaseModel):
    total_cards: int
    mastered_cards: int    # cards in bucket 2 or higher
    struggling_cards: int  # cards in bucket 0
    average_bucket: float
