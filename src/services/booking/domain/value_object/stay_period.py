from dataclasses import dataclass
from datetime import date

from services.shared.domain.exception import InvalidRangeException


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)"""

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise InvalidRangeException()

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days
