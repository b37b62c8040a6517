"""
Digital Rain CLI - Command-line entry point.

Usage:
    digital-rain
    digital-rain --speed 1.2 --density 0.35 --bold --no-fade
    digital-rain --fps 30 --charset binary
    digital-rain --log-file rain.log --log-level DEBUG

Keyboard Shortcuts:
    [q] / [Esc] Quit
    [p]         Pause / resume
"""

import argparse
import logging
import math
import sys
from typing import List, Optional

from .constants import Defaults, FrameRate, Glyphs
from .errors import RainError, handle_error
from .models import RainSettings
from .scheduler import run_rain

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def finite_float(value: str) -> float:
    """argparse type for floats that rejects inf and nan."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {value!r}") from None
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"value must be finite: {value!r}")
    return number


class RainArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports malformed invocations with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = RainArgumentParser(
        prog="digital-rain",
        description="Digital Rain - falling glyph streams in your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
    digital-rain                          # Run with defaults
    digital-rain --speed 1.5 --bold       # Faster rain, bold heads
    digital-rain --density 0.6 --no-fade  # Denser rain, hard clear each frame

Keyboard Shortcuts:
    q, Esc  Quit
    p, P    Pause / resume
        """
    )
    parser.add_argument("--speed", type=finite_float, default=Defaults.SPEED,
                        help=f"Global fall-speed multiplier (default: {Defaults.SPEED})")
    parser.add_argument("--density", type=finite_float, default=Defaults.DENSITY,
                        help=f"Fraction of active columns, clamped to 0..1 (default: {Defaults.DENSITY})")
    parser.add_argument("--bold", action="store_true",
                        help="Render stream heads in bold")
    parser.add_argument("--no-fade", action="store_true",
                        help="Clear the screen each frame instead of fading")
    parser.add_argument("--fps", type=int, default=FrameRate.DEFAULT_FPS,
                        help=f"Target frame rate, clamped to {FrameRate.MIN_FPS}..{FrameRate.MAX_FPS} "
                             f"(default: {FrameRate.DEFAULT_FPS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the random generator for a reproducible run")
    parser.add_argument("--charset", choices=sorted(Glyphs.SETS), default=Defaults.CHARSET,
                        help=f"Glyph set (default: {Defaults.CHARSET})")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write diagnostic logs to this file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=Defaults.LOG_LEVEL,
                        help=f"Log level for --log-file (default: {Defaults.LOG_LEVEL})")
    return parser


def parse_settings(argv: Optional[List[str]] = None) -> RainSettings:
    """Parse command-line arguments into clamped settings."""
    args = build_parser().parse_args(argv)
    return RainSettings.from_args(args)


def configure_logging(settings: RainSettings):
    """
    Route logs to --log-file, or nowhere.

    curses owns the terminal while the rain runs, so nothing may be logged
    to stderr.
    """
    package_logger = logging.getLogger("digital_rain")
    if settings.log_file:
        logging.basicConfig(
            filename=settings.log_file,
            level=getattr(logging, settings.log_level),
            format=LOG_FORMAT,
        )
    else:
        package_logger.addHandler(logging.NullHandler())
        package_logger.propagate = False


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for the digital-rain command."""
    settings = parse_settings(argv)
    configure_logging(settings)
    logger.info(f"Settings: {settings}")

    try:
        run_rain(settings)
    except RainError as e:
        return handle_error(e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
