"""Run the elevator in a terminal, reading floor numbers from stdin."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from lift import LiftConfig, LiftError

from .input_feed import InputFeed
from .loop import ConsoleSession
from .presenter import Presenter, clear_screen

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, help="Path to a JSON configuration file")
    parser.add_argument("--min-floor", type=int, help="Lowest floor served")
    parser.add_argument("--max-floor", type=int, help="Highest floor served")
    parser.add_argument("--start-floor", type=int, help="Floor the car starts on")
    parser.add_argument("--interval", type=float, help="Seconds between ticks")
    parser.add_argument(
        "--ticks",
        type=int,
        help="Stop after this many ticks instead of running forever",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Append each frame instead of clearing the screen",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=Path, help="Write logs here instead of stderr")
    return parser


def load_config(args: argparse.Namespace) -> LiftConfig:
    data = json.loads(args.config.read_text()) if args.config else {}
    if not isinstance(data, dict):
        raise ValueError(f"{args.config}: configuration must be a JSON object")
    overrides = {
        "min_floor": args.min_floor,
        "max_floor": args.max_floor,
        "start_floor": args.start_floor,
        "tick_interval_s": args.interval,
    }
    data.update({key: value for key, value in overrides.items() if value is not None})
    return LiftConfig.from_dict(data)


def configure_logging(level: str, log_file: Optional[Path]) -> None:
    logging.basicConfig(
        level=level,
        filename=str(log_file) if log_file else None,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    try:
        config = load_config(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    logger.info("Starting console with %s", config)
    elevator = config.build_elevator()
    presenter = Presenter(config.floor_range(), clear=None if args.no_clear else clear_screen)
    session = ConsoleSession(
        elevator,
        InputFeed().start(),
        presenter,
        tick_interval_s=config.tick_interval_s,
    )
    try:
        session.run(max_ticks=args.ticks)
    except LiftError as exc:
        print(f"Fatal: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0
