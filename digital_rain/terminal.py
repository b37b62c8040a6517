"""
Input/Resize Handler and terminal session management.

Runs once per frame before simulation and rendering: polls the keyboard
without blocking and re-queries the terminal size, reallocating the column
list when the geometry changed. Resizes are detected by polling rather than
from SIGWINCH; curses reports the new size through getmaxyx() after it has
seen the resize.
"""

import atexit
import locale
import logging
import os
from enum import Enum
from typing import Tuple

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from .colors import Colors
from .columns import ColumnSimulator
from .constants import Keys
from .errors import TerminalUnavailableError
from .models import RainState

logger = logging.getLogger(__name__)


class KeyAction(Enum):
    """Actions produced by a key press."""
    NONE = "none"
    QUIT = "quit"
    PAUSE = "pause"


def key_action(key: int) -> KeyAction:
    """Map a curses key code to an action. Unknown keys map to NONE."""
    if key in Keys.QUIT:
        return KeyAction.QUIT
    if key in Keys.PAUSE:
        return KeyAction.PAUSE
    return KeyAction.NONE


class InputHandler:
    """Per-frame keyboard polling and resize detection."""

    def __init__(self, screen, simulator: ColumnSimulator):
        self.screen = screen
        self.simulator = simulator

    def poll_key(self) -> KeyAction:
        """Read one pending key without blocking."""
        return key_action(self.screen.getch())

    def dimensions(self) -> Tuple[int, int]:
        """Current terminal size as (width, height)."""
        height, width = self.screen.getmaxyx()
        return width, height

    def check_resize(self, state: RainState) -> bool:
        """
        Reallocate the column list if the terminal size changed.

        Columns present in both geometries keep their state. The screen is
        cleared so no glyphs from the old geometry survive.

        Raises:
            ColumnAllocationError: if the new column list cannot be built
        """
        width, height = self.dimensions()
        if width == state.width and height == state.height:
            return False
        logger.debug(f"Terminal resized {state.width}x{state.height} -> {width}x{height}")
        state.columns = self.simulator.resize_columns(state.columns, width, height)
        state.width = width
        state.height = height
        self.screen.clear()
        return True


def restore_terminal():
    """Leave curses mode if it is still active. Safe to call repeatedly."""
    if not CURSES_AVAILABLE:
        return
    try:
        if not curses.isendwin():
            curses.endwin()
    except curses.error:
        # initscr() was never called
        pass


class TerminalSession:
    """
    Enter curses mode on __enter__ and restore the terminal on __exit__.

    An atexit hook is registered as well so the terminal is restored when
    the interpreter exits without unwinding through __exit__.
    """

    def __init__(self, escape_delay: int = Keys.ESCAPE_DELAY_MS):
        self.escape_delay = escape_delay
        self.screen = None

    def __enter__(self):
        if not CURSES_AVAILABLE:
            raise TerminalUnavailableError(
                "curses library not available (on Windows: pip install windows-curses)",
                "session")
        locale.setlocale(locale.LC_ALL, "")
        os.environ.setdefault("ESCDELAY", str(self.escape_delay))
        atexit.register(restore_terminal)
        try:
            self.screen = curses.initscr()
        except curses.error as e:
            atexit.unregister(restore_terminal)
            raise TerminalUnavailableError(f"cannot initialize terminal: {e}", "session") from e
        try:
            curses.noecho()
            curses.cbreak()
            self.screen.keypad(True)
            self.screen.nodelay(True)
            try:
                curses.curs_set(0)  # Hide cursor
            except curses.error:
                pass
            if curses.has_colors():
                Colors.init_colors()
        except curses.error as e:
            self._restore()
            raise TerminalUnavailableError(f"cannot configure terminal: {e}", "session") from e
        except BaseException:
            self._restore()
            raise
        logger.info("Terminal session started")
        return self.screen

    def __exit__(self, exc_type, exc, tb):
        self._restore()
        logger.info("Terminal session restored")
        return False

    def _restore(self):
        if self.screen is not None:
            self.screen.keypad(False)
            curses.nocbreak()
            curses.echo()
        restore_terminal()
        atexit.unregister(restore_terminal)
