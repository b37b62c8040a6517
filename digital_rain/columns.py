"""
Column Simulator - Per-column rain state and the per-frame update.

Each terminal column carries an independent falling stream. Active columns
advance their head every frame and respawn once the whole trail has left
the bottom edge; idle columns trickle back to life with a small
density-scaled probability.
"""

import logging
import random
from typing import List, Optional

from .constants import SpawnRanges
from .errors import ColumnAllocationError
from .models import Column, RainSettings, RainState

logger = logging.getLogger(__name__)


class ColumnSimulator:
    """Spawns, advances and reallocates rain columns."""

    def __init__(self, settings: RainSettings, rng: Optional[random.Random] = None):
        self.settings = settings
        self.rng = rng or random.Random(settings.seed)

    def _roll(self, column: Column, height: int):
        """Re-roll head offset, trail length and speed."""
        rng = self.rng
        column.head_row = -rng.randrange(max(1, height))
        column.trail_length = SpawnRanges.TRAIL_MIN + rng.randrange(SpawnRanges.TRAIL_SPAN)
        column.fall_speed = (SpawnRanges.SPEED_MIN + rng.random() * SpawnRanges.SPEED_SPAN) \
            * self.settings.speed

    def spawn_column(self, height: int) -> Column:
        """Create a fresh randomized column."""
        column = Column(active=self.rng.random() < self.settings.density)
        self._roll(column, height)
        return column

    def respawn(self, column: Column, height: int):
        """Restart a column whose trail left the screen; it may go idle instead."""
        column.active = self.rng.random() < self.settings.density
        self._roll(column, height)

    def activate(self, column: Column, height: int):
        """Wake an idle column with fresh parameters."""
        column.active = True
        self._roll(column, height)

    def advance(self, column: Column, height: int):
        """Advance a single column by one frame."""
        if column.active:
            if column.fall_speed < 1.0:
                if self.rng.random() < column.fall_speed:
                    column.head_row += 1
            else:
                column.head_row += int(column.fall_speed)
            if column.tail_row > height:
                self.respawn(column, height)
        elif self.rng.random() < self.settings.density / SpawnRanges.ACTIVATION_DIVISOR:
            self.activate(column, height)

    def update(self, state: RainState):
        """Advance every column of the loop state in place."""
        for column in state.columns:
            self.advance(column, state.height)

    def initial_columns(self, width: int, height: int) -> List[Column]:
        """Allocate and randomize the startup column list."""
        try:
            return [self.spawn_column(height) for _ in range(max(0, width))]
        except MemoryError:
            logger.error(f"Column allocation failed at startup (width={width})")
            raise ColumnAllocationError(width, "startup") from None

    def resize_columns(self, columns: List[Column], width: int, height: int) -> List[Column]:
        """
        Build a new column list for a new terminal width.

        Indices present in both widths keep their existing state, indices
        added by growth are freshly spawned, indices removed by shrinking
        are dropped.
        """
        try:
            kept = columns[:width]
            fresh = [self.spawn_column(height) for _ in range(len(kept), max(0, width))]
            return kept + fresh
        except MemoryError:
            logger.error(f"Column allocation failed on resize (width={width})")
            raise ColumnAllocationError(width, "resize") from None
