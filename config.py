import argparse
import logging
from dataclasses import dataclass


@dataclass
class GameConfig:
    width: int = 800
    height: int = 600
    fps: int = 30
    caption: str = "Pong"
    headless: bool = False
    ticks: int = 0
    log_level: str = "INFO"

    def __post_init__(self):
        for name in ("width", "height", "fps"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.ticks < 0:
            raise ValueError(f"ticks must not be negative, got {self.ticks}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level {self.log_level!r}")

    @property
    def level(self):
        return logging.getLevelName(self.log_level.upper())


def build_parser():
    parser = argparse.ArgumentParser(description="Mouse-controlled Pong against the computer.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument("--headless", action="store_true",
                        help="run the simulation without a window")
    parser.add_argument("--ticks", type=int, default=0,
                        help="stop after this many ticks (0 = until closed; headless default 900)")
    parser.add_argument("--log-level", default="INFO")
    return parser


def parse_config(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return GameConfig(width=args.width, height=args.height, fps=args.fps,
                          headless=args.headless, ticks=args.ticks,
                          log_level=args.log_level)
    except ValueError as e:
        parser.error(str(e))
