from .review_factory import ReviewFactory

__all__ = ["ReviewFactory"]
