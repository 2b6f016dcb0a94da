from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from .floors import FloorRange


class LiftError(Exception):
    """Base class for every error raised by the lift packages."""


class InvalidFloorText(LiftError):
    """Input text that does not spell an integer floor number."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid floor number: {text!r}")


class OutOfRange(LiftError):
    """A floor number outside the serviceable range."""

    def __init__(self, floor: int, floors: "FloorRange") -> None:
        self.floor = floor
        self.floors = floors
        super().__init__(
            f"floor {floor} is not in range {floors.minimum}..{floors.maximum}"
        )


class ChannelDisconnected(LiftError):
    """The input source stopped producing requests."""


class DisplayIOFailure(LiftError):
    """The display could not be refreshed."""
