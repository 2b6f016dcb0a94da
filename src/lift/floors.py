from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .errors import OutOfRange


@dataclass(frozen=True)
class FloorRange:
    """Closed range of floors a car can stop at."""

    minimum: int = -2
    maximum: int = 5

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"Floor range is empty: {self.minimum} > {self.maximum}"
            )

    def validate(self, floor: int) -> int:
        if floor not in self:
            raise OutOfRange(floor, self)
        return floor

    def index(self, floor: int) -> int:
        """Return the position of ``floor`` counted from the lowest floor."""
        return self.validate(floor) - self.minimum

    def __contains__(self, floor: object) -> bool:
        if isinstance(floor, bool) or not isinstance(floor, int):
            return False
        return self.minimum <= floor <= self.maximum

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.minimum, self.maximum + 1))

    def __len__(self) -> int:
        return self.maximum - self.minimum + 1
