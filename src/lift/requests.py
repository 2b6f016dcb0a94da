from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterable, Iterator, List, Optional


class RequestQueue:
    """Pending target floors, kept unique and in ascending order."""

    def __init__(self, floors: Optional[Iterable[int]] = None) -> None:
        self._floors: List[int] = []
        for floor in floors or ():
            self.add(floor)

    def add(self, floor: int) -> bool:
        """Insert ``floor``; return ``False`` if it was already pending."""
        if floor in self:
            return False
        insort(self._floors, floor)
        return True

    def discard(self, floor: int) -> bool:
        """Remove ``floor``; return whether it was pending."""
        position = bisect_left(self._floors, floor)
        if position < len(self._floors) and self._floors[position] == floor:
            del self._floors[position]
            return True
        return False

    def first(self) -> int:
        if not self._floors:
            raise LookupError("No pending floors")
        return self._floors[0]

    def last(self) -> int:
        if not self._floors:
            raise LookupError("No pending floors")
        return self._floors[-1]

    def __contains__(self, floor: int) -> bool:
        position = bisect_left(self._floors, floor)
        return position < len(self._floors) and self._floors[position] == floor

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._floors))

    def __len__(self) -> int:
        return len(self._floors)

    def __bool__(self) -> bool:
        return bool(self._floors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestQueue):
            return NotImplemented
        return self._floors == other._floors

    def __repr__(self) -> str:
        return f"RequestQueue({self._floors!r})"
