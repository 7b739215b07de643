from .rating import MAX_RATING, MIN_RATING, Rating
from .review_draft import ReviewDraft
from .review_id import ReviewId

__all__ = ["MAX_RATING", "MIN_RATING", "Rating", "ReviewDraft", "ReviewId"]
