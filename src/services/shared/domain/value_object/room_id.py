from dataclasses import dataclass


@dataclass(frozen=True)
class RoomId:
    """客室ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("RoomId cannot be empty")

    def __str__(self) -> str:
        return self.value
