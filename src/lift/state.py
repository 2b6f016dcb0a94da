from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class StateKind(str, Enum):
    STOPPED = "stopped"
    MOVING = "moving"
    OPENED = "opened"


@dataclass(frozen=True)
class MotionState:
    """What the car is doing: ``Stopped``, ``Moving(direction)`` or ``Opened``.

    Only ``Moving`` carries a direction; use the constructors below rather
    than building instances by hand.
    """

    kind: StateKind
    direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        if (self.kind == StateKind.MOVING) != (self.direction is not None):
            raise ValueError("Only a moving state carries a direction")

    @classmethod
    def stopped(cls) -> "MotionState":
        return cls(StateKind.STOPPED)

    @classmethod
    def moving(cls, direction: Direction) -> "MotionState":
        return cls(StateKind.MOVING, direction)

    @classmethod
    def opened(cls) -> "MotionState":
        return cls(StateKind.OPENED)

    @property
    def is_moving(self) -> bool:
        return self.kind == StateKind.MOVING

    @property
    def is_opened(self) -> bool:
        return self.kind == StateKind.OPENED

    def __str__(self) -> str:
        if self.direction is not None:
            return f"Moving({self.direction.label})"
        return self.kind.value.capitalize()
