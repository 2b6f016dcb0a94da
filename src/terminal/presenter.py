from __future__ import annotations

import subprocess
import sys
from typing import Callable, Optional, TextIO

from lift.elevator import CarSnapshot
from lift.errors import DisplayIOFailure, LiftError
from lift.floors import FloorRange
from lift.state import Direction

BANNER = "Elevator\n\nEnter floor number to move elevator"
CELL_WIDTH = 6


def marker(snapshot: CarSnapshot) -> str:
    if snapshot.doors_open:
        return "*"
    return "^" if snapshot.direction == Direction.UP else "v"


def render(snapshot: CarSnapshot, floors: FloorRange) -> str:
    """Draw the building diagram for one refresh, without the error line."""
    indent = " " * (CELL_WIDTH * snapshot.index + 2)
    cells = " ".join(f"[{floor:>2} ]" for floor in floors)
    return f"\n{BANNER}\n\n{indent}{marker(snapshot)}\n{cells}\n\nState: {snapshot.state}\n"


def clear_screen() -> None:
    # A non-zero exit (e.g. no TERM) leaves the screen as is; only a missing
    # or unrunnable command is fatal.
    try:
        subprocess.run(["clear"])
    except OSError as exc:
        raise DisplayIOFailure(f"could not clear the screen: {exc}") from exc


class Presenter:
    """Writes the diagram to a terminal, clearing it first."""

    def __init__(
        self,
        floors: FloorRange,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        clear: Optional[Callable[[], None]] = clear_screen,
    ) -> None:
        self.floors = floors
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.clear = clear

    def show(self, snapshot: CarSnapshot, error: Optional[LiftError] = None) -> None:
        if self.clear is not None:
            self.clear()
        try:
            self.out.write(render(snapshot, self.floors))
            self.out.flush()
            if error is not None:
                self.err.write(f"Error: {error}\n\n")
                self.err.flush()
        except OSError as exc:
            raise DisplayIOFailure(f"could not write the display: {exc}") from exc
