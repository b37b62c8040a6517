"""
Digital Rain - Falling glyph streams in the terminal

Animated "digital rain" with fading trails, bright heads, adjustable
density and speed, pause, and live terminal-resize handling.

Basic Usage:
    from digital_rain import RainSettings, run_rain
    run_rain(RainSettings(speed=1.2, density=0.35, bold=True))

Headless Usage (any object with the curses window methods):
    from digital_rain import FrameScheduler, RainSettings

    scheduler = FrameScheduler(window, RainSettings(seed=7))
    scheduler.run(max_frames=100)
"""

__version__ = "1.0.0"

# Core classes
from .scheduler import FrameScheduler, run_rain
from .cli import main
from .columns import ColumnSimulator
from .renderer import RainRenderer
from .terminal import InputHandler, KeyAction, TerminalSession, key_action

# Data models
from .models import Column, RainSettings, RainState

# Visual components
from .colors import Colors, Palette

# Errors
from .errors import (
    RainError,
    ColumnAllocationError,
    TerminalUnavailableError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "FrameScheduler",
    "run_rain",
    "main",
    "ColumnSimulator",
    "RainRenderer",
    "InputHandler",
    "KeyAction",
    "TerminalSession",
    "key_action",
    # Models
    "Column",
    "RainSettings",
    "RainState",
    # Visual
    "Colors",
    "Palette",
    # Errors
    "RainError",
    "ColumnAllocationError",
    "TerminalUnavailableError",
]
