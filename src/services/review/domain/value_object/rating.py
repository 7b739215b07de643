from dataclasses import dataclass

from services.shared.domain.exception import ValidationException

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class Rating:
    """評価（1〜5の整数）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationException("rating", "Rating must be an integer")
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValidationException(
                "rating", f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )

    def __int__(self) -> int:
        return self.value
