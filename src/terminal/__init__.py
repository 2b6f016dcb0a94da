"""Terminal front end: stdin request feed, text display and the tick loop."""

from .input_feed import InputFeed, ParsedInput, parse_floor
from .loop import ConsoleSession
from .presenter import Presenter, clear_screen, render

__all__ = [
    "ConsoleSession",
    "InputFeed",
    "ParsedInput",
    "Presenter",
    "clear_screen",
    "parse_floor",
    "render",
]
