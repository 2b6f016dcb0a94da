from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .elevator import Elevator
from .floors import FloorRange


@dataclass
class LiftConfig:
    """Settings shared by the console and the HTTP service."""

    min_floor: int = -2
    max_floor: int = 5
    start_floor: int = 0
    tick_interval_s: float = 1.0

    def validate(self) -> None:
        if self.min_floor > self.max_floor:
            raise ValueError("min_floor must not be above max_floor")
        if not self.min_floor <= self.start_floor <= self.max_floor:
            raise ValueError("start_floor must be within the floor range")
        if self.tick_interval_s <= 0:
            raise ValueError("tick_interval_s must be positive")

    def floor_range(self) -> FloorRange:
        return FloorRange(self.min_floor, self.max_floor)

    def build_elevator(self) -> Elevator:
        return Elevator(self.floor_range(), start_floor=self.start_floor)

    @classmethod
    def from_dict(cls, data: Dict) -> "LiftConfig":
        cfg = cls(
            min_floor=int(data.get("min_floor", -2)),
            max_floor=int(data.get("max_floor", 5)),
            start_floor=int(data.get("start_floor", 0)),
            tick_interval_s=float(data.get("tick_interval_s", 1.0)),
        )
        cfg.validate()
        return cfg
