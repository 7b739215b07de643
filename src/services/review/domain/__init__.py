from .entity import Review
from .factory import ReviewFactory
from .repository import ReviewRepository
from .value_object import Rating, ReviewDraft, ReviewId

__all__ = [
    "Rating",
    "Review",
    "ReviewDraft",
    "ReviewFactory",
    "ReviewId",
    "ReviewRepository",
]
