"""
Renderer - Draws one frame of digital rain onto a curses window.

A frame is a background pass followed by a glyph pass. In fade mode the
background pass paints every cell with a dim blank instead of clearing, so
the new frame is drawn directly over what the terminal already shows; no
separate framebuffer is kept. With fade disabled the window is erased.
"""

import random
from typing import Optional

# Handle curses import for Windows compatibility
try:
    import curses
    _CURSES_ERROR = curses.error
except ImportError:
    _CURSES_ERROR = ()

from .colors import Palette
from .constants import Render
from .models import Column, RainSettings, RainState


class RainRenderer:
    """Background and glyph passes for the rain."""

    def __init__(self, screen, settings: RainSettings, palette: Palette,
                 rng: Optional[random.Random] = None):
        self.screen = screen
        self.settings = settings
        self.palette = palette
        self.rng = rng or random.Random(settings.seed)
        self.glyphs = settings.glyphs

    def render(self, state: RainState):
        """Draw a full frame. Call present() to commit it."""
        self.draw_background(state.width, state.height)
        for x, column in enumerate(state.columns):
            if x >= state.width:
                break
            if column.active:
                self.draw_column(x, column, state.width, state.height)

    def draw_background(self, width: int, height: int):
        """Fade pass, or a hard erase when fading is disabled."""
        if not self.settings.fade:
            self.screen.erase()
            return
        if width <= 0:
            return
        blank = " " * width
        for y in range(height):
            self._addstr(y, 0, blank, self.palette.background, width, height)

    def draw_column(self, x: int, column: Column, width: int, height: int):
        """Draw head and trail glyphs of one active column."""
        head = column.head_row
        tail_start = column.tail_row
        for y in range(max(0, tail_start), min(head, height - 1) + 1):
            if y == head:
                attr = self.palette.head
            elif head - y > column.trail_length - Render.TRAIL_DIM_ROWS:
                attr = self.palette.trail_dim
            else:
                attr = self.palette.trail
            self._addstr(y, x, self.rng.choice(self.glyphs), attr, width, height)

    def present(self):
        """Commit everything drawn this frame."""
        self.screen.refresh()

    def _addstr(self, y: int, x: int, text: str, attr: int, width: int, height: int):
        """Add string with bounds checking."""
        if not (0 <= y < height and 0 <= x < width):
            return
        text = text[:width - x]
        try:
            self.screen.addstr(y, x, text, attr)
        except _CURSES_ERROR:
            # Writing the bottom-right cell moves the cursor off-screen
            pass
