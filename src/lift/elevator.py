from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .floors import FloorRange
from .requests import RequestQueue
from .state import Direction, MotionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CarSnapshot:
    """Read-only view of the car for presenters."""

    floor: int
    index: int
    doors_open: bool
    state: MotionState
    direction: Direction
    pending: Tuple[int, ...]

    def to_dict(self) -> dict:
        return {
            "floor": self.floor,
            "index": self.index,
            "doors_open": self.doors_open,
            "state": str(self.state),
            "direction": self.direction.value,
            "pending": list(self.pending),
        }


class Elevator:
    """A single car moving one floor per tick towards its pending stops.

    Requests are collected with :meth:`move_to` and acted on by :meth:`tick`.
    The car keeps travelling in its current direction while stops remain
    ahead of it and reverses once it reaches the farthest one (SCAN).
    """

    def __init__(self, floors: Optional[FloorRange] = None, start_floor: int = 0) -> None:
        self._floors = floors or FloorRange()
        self._current = self._floors.validate(start_floor)
        self._stops = RequestQueue()
        self._state = MotionState.stopped()
        self._direction = Direction.UP

    @property
    def floors(self) -> FloorRange:
        return self._floors

    @property
    def current_floor(self) -> int:
        return self._current

    @property
    def state(self) -> MotionState:
        return self._state

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending(self) -> Tuple[int, ...]:
        return tuple(self._stops)

    def is_opened(self) -> bool:
        return self._state.is_opened

    def index(self) -> int:
        return self._floors.index(self._current)

    def move_to(self, floor: int) -> None:
        """Queue a stop at ``floor``.

        Raises :class:`~lift.errors.OutOfRange` without touching the car when
        the floor cannot be served. The direction is only chosen here when
        the car had nothing else to do.
        """
        self._floors.validate(floor)
        if not self._stops:
            self._direction = Direction.UP if floor > self._current else Direction.DOWN
        if self._stops.add(floor):
            logger.info("Queued floor %s (pending %s)", floor, list(self._stops))

    def tick(self) -> None:
        previous = self._state
        if self._stops.discard(self._current):
            self._state = MotionState.opened()
        elif not self._stops:
            self._state = MotionState.stopped()
        elif not self._state.is_moving:
            self._state = MotionState.moving(self._direction)
        else:
            self._advance()

        if self._state != previous:
            logger.debug("Car %s -> %s at floor %s", previous, self._state, self._current)

    def _advance(self) -> None:
        # Never travel away from every pending stop; head back towards them.
        heading = self._state.direction
        if heading == Direction.UP and self._current > self._stops.last():
            heading = Direction.DOWN
        elif heading == Direction.DOWN and self._current < self._stops.first():
            heading = Direction.UP
        self._direction = heading

        if heading == Direction.UP:
            self._current += 1
            if self._current >= self._stops.last():
                self._direction = Direction.DOWN
        else:
            self._current -= 1
            if self._current <= self._stops.first():
                self._direction = Direction.UP
        self._state = MotionState.moving(self._direction)

    def snapshot(self) -> CarSnapshot:
        return CarSnapshot(
            floor=self._current,
            index=self.index(),
            doors_open=self.is_opened(),
            state=self._state,
            direction=self._direction,
            pending=self.pending,
        )
