from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """ホテル所在地"""

    street: str
    city: str
    state: str
    country: str
    zip_code: str

    def __post_init__(self) -> None:
        if not self.street.strip() or not self.city.strip():
            raise ValueError("Address must have a street and a city")
