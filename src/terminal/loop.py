from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from lift.elevator import Elevator
from lift.errors import LiftError, OutOfRange

from .input_feed import InputFeed
from .presenter import Presenter

logger = logging.getLogger(__name__)


class ConsoleSession:
    """Drives the car from an input feed and redraws it every tick.

    Each cycle consumes at most one request, so a burst of input is worked
    off one line per tick. ``last_error`` holds the recoverable error of the
    most recent cycle only.
    """

    def __init__(
        self,
        elevator: Elevator,
        feed: InputFeed,
        presenter: Presenter,
        tick_interval_s: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.elevator = elevator
        self.feed = feed
        self.presenter = presenter
        self.tick_interval_s = tick_interval_s
        self.clock = clock
        self.sleep = sleep
        self.ticks: int = 0
        self.last_error: Optional[LiftError] = None

    def step(self) -> None:
        self.last_error = None
        message = self.feed.poll()
        if message is not None:
            if message.error is not None:
                self.last_error = message.error
            else:
                self.last_error = self._request(message.floor)
        self.elevator.tick()
        self.ticks += 1
        self.presenter.show(self.elevator.snapshot(), self.last_error)

    def run(self, max_ticks: Optional[int] = None) -> None:
        """Step on a fixed cadence until ``max_ticks`` or a fatal error."""
        deadline = self.clock()
        while max_ticks is None or self.ticks < max_ticks:
            try:
                self.step()
            except LiftError:
                logger.error("Stopping after %s ticks", self.ticks)
                raise
            deadline += self.tick_interval_s
            delay = deadline - self.clock()
            if delay > 0:
                self.sleep(delay)

    def _request(self, floor: Optional[int]) -> Optional[LiftError]:
        try:
            self.elevator.move_to(floor)
        except OutOfRange as exc:
            logger.info("Rejected request: %s", exc)
            return exc
        return None
