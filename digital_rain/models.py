"""
Digital Rain Data Models - Column state, settings and loop state.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import Defaults, FrameRate, Glyphs


def clamp_density(density: float) -> float:
    """Clamp density into [0, 1]."""
    return min(1.0, max(0.0, density))


def clamp_fps(fps: int) -> int:
    """Clamp a target frame rate into the supported range."""
    return min(FrameRate.MAX_FPS, max(FrameRate.MIN_FPS, fps))


@dataclass
class Column:
    """Rain state for one terminal column."""
    head_row: int = 0
    trail_length: int = 0
    fall_speed: float = 0.0
    active: bool = False

    @property
    def tail_row(self) -> int:
        """Row of the far end of the trail."""
        return self.head_row - self.trail_length


@dataclass
class RainSettings:
    """Global parameters collected from the command line."""
    speed: float = Defaults.SPEED
    density: float = Defaults.DENSITY
    bold: bool = Defaults.BOLD
    fade: bool = Defaults.FADE
    fps: int = FrameRate.DEFAULT_FPS
    seed: Optional[int] = None
    charset: str = Defaults.CHARSET
    log_file: Optional[str] = None
    log_level: str = Defaults.LOG_LEVEL

    def __post_init__(self):
        self.density = clamp_density(self.density)
        self.fps = clamp_fps(self.fps)

    @classmethod
    def from_args(cls, args) -> 'RainSettings':
        """Build settings from an argparse namespace."""
        return cls(
            speed=args.speed,
            density=args.density,
            bold=args.bold,
            fade=not args.no_fade,
            fps=args.fps,
            seed=args.seed,
            charset=args.charset,
            log_file=args.log_file,
            log_level=args.log_level,
        )

    @property
    def frame_interval(self) -> float:
        """Seconds slept between frames."""
        return 1.0 / self.fps

    @property
    def glyphs(self) -> str:
        return Glyphs.SETS[self.charset]


@dataclass
class RainState:
    """Mutable state owned by the main loop."""
    columns: List[Column] = field(default_factory=list)
    width: int = 0
    height: int = 0
    paused: bool = False
    running: bool = True
    frame: int = 0

    def toggle_pause(self) -> bool:
        """Flip the paused flag and return the new value."""
        self.paused = not self.paused
        return self.paused
