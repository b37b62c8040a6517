"""
Digital Rain Color Definitions - Curses color pair management.
"""

from dataclasses import dataclass

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False


@dataclass(frozen=True)
class Palette:
    """Resolved curses attributes for each rain style."""
    background: int = 0  # Blank fade cells
    trail: int = 0       # Normal trail glyphs
    trail_dim: int = 0   # Trail glyphs near the far end
    head: int = 0        # Leading glyph


class Colors:
    """Color pairs for curses."""
    MATRIX_DIM = 1       # Dim green fade background
    MATRIX_TRAIL = 2     # Green trail
    MATRIX_HEAD = 3      # White head

    @staticmethod
    def init_colors():
        """Initialize curses color pairs on the terminal's default background."""
        if not CURSES_AVAILABLE or curses is None:
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        curses.init_pair(Colors.MATRIX_DIM, curses.COLOR_GREEN, background)
        curses.init_pair(Colors.MATRIX_TRAIL, curses.COLOR_GREEN, background)
        curses.init_pair(Colors.MATRIX_HEAD, curses.COLOR_WHITE, background)

    @staticmethod
    def palette(bold_head: bool = False) -> Palette:
        """Build the rain palette. Requires an initialized screen."""
        if not CURSES_AVAILABLE or curses is None:
            return Palette()
        trail = curses.color_pair(Colors.MATRIX_TRAIL)
        head = curses.color_pair(Colors.MATRIX_HEAD)
        if bold_head:
            head |= curses.A_BOLD
        return Palette(
            background=curses.color_pair(Colors.MATRIX_DIM) | curses.A_DIM,
            trail=trail,
            trail_dim=trail | curses.A_DIM,
            head=head,
        )
