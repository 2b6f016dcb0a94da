"""Single-car elevator state machine."""

from .config import LiftConfig
from .elevator import CarSnapshot, Elevator
from .errors import (
    ChannelDisconnected,
    DisplayIOFailure,
    InvalidFloorText,
    LiftError,
    OutOfRange,
)
from .floors import FloorRange
from .requests import RequestQueue
from .state import Direction, MotionState, StateKind

__all__ = [
    "CarSnapshot",
    "ChannelDisconnected",
    "Direction",
    "DisplayIOFailure",
    "Elevator",
    "FloorRange",
    "InvalidFloorText",
    "LiftConfig",
    "LiftError",
    "MotionState",
    "OutOfRange",
    "RequestQueue",
    "StateKind",
]
