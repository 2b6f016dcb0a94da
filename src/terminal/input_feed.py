from __future__ import annotations

import logging
import queue
import re
import sys
import threading
from dataclasses import dataclass
from typing import Optional, TextIO

from lift.errors import ChannelDisconnected, InvalidFloorText

logger = logging.getLogger(__name__)

_FLOOR_TEXT = re.compile(r"[+-]?[0-9]+")


def parse_floor(text: str) -> int:
    """Turn a line of user input into a floor number.

    Only the syntax is checked here; whether the building has that floor is
    decided by the car when the request is applied.
    """
    stripped = text.strip()
    if not _FLOOR_TEXT.fullmatch(stripped):
        raise InvalidFloorText(stripped)
    return int(stripped)


@dataclass(frozen=True)
class ParsedInput:
    """One line from the input source: a floor or the reason it was rejected."""

    floor: Optional[int] = None
    error: Optional[InvalidFloorText] = None

    @classmethod
    def from_text(cls, text: str) -> "ParsedInput":
        try:
            return cls(floor=parse_floor(text))
        except InvalidFloorText as exc:
            return cls(error=exc)


_CLOSED = object()


class InputFeed:
    """Reads floor requests on a background thread.

    Parsed lines are handed over through an unbounded queue; :meth:`poll`
    takes at most one of them without waiting.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._messages: "queue.Queue[object]" = queue.Queue()
        self._closed = False
        self._thread = threading.Thread(target=self._read_lines, name="input-feed", daemon=True)

    def start(self) -> "InputFeed":
        self._thread.start()
        return self

    def join(self, timeout: Optional[float] = None) -> None:
        self._thread.join(timeout)

    def poll(self) -> Optional[ParsedInput]:
        """Return the oldest pending message, or ``None`` if nothing arrived.

        Raises :class:`~lift.errors.ChannelDisconnected` once the reader has
        stopped and every message it produced has been consumed.
        """
        if self._closed:
            raise ChannelDisconnected("input source closed")
        try:
            message = self._messages.get_nowait()
        except queue.Empty:
            return None
        if message is _CLOSED:
            self._closed = True
            raise ChannelDisconnected("input source closed")
        return message  # type: ignore[return-value]

    def _read_lines(self) -> None:
        try:
            while True:
                line = self.stream.readline()
                if not line:
                    logger.warning("Input stream reached end of file")
                    return
                message = ParsedInput.from_text(line)
                logger.debug("Read %r -> %s", line, message)
                self._messages.put(message)
        except (OSError, ValueError) as exc:
            logger.warning("Input stream failed: %s", exc)
        finally:
            self._messages.put(_CLOSED)
