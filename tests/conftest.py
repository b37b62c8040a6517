"""
Shared fixtures for Digital Rain tests.

FakeScreen stands in for a curses window so no test opens a real terminal.
"""

import curses
import os
import sys

import pytest


# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class FakeScreen:
    """Records writes to a width x height window and rejects out-of-bounds ones."""

    def __init__(self, width: int = 80, height: int = 24, keys=()):
        self.width = width
        self.height = height
        self.keys = list(keys)
        self.writes = []
        self.erase_count = 0
        self.clear_count = 0
        self.refresh_count = 0

    def getmaxyx(self):
        return self.height, self.width

    def getch(self):
        if self.keys:
            return self.keys.pop(0)
        return -1

    def addstr(self, y, x, text, attr=0):
        assert 0 <= y < self.height, f"row {y} outside 0..{self.height}"
        assert 0 <= x < self.width, f"column {x} outside 0..{self.width}"
        assert x + len(text) <= self.width, f"write at {x} of {len(text)} cells overflows {self.width}"
        self.writes.append((y, x, text, attr))
        # Like curses: the cursor cannot advance past the bottom-right cell
        if y == self.height - 1 and x + len(text) == self.width:
            raise curses.error("addwstr() returned ERR")

    def erase(self):
        self.erase_count += 1

    def clear(self):
        self.clear_count += 1

    def refresh(self):
        self.refresh_count += 1

    def glyph_writes(self, background_attr):
        """Writes other than fade-pass blanks."""
        return [w for w in self.writes if w[3] != background_attr]


@pytest.fixture
def make_screen():
    """Factory for screens of a given size with queued key presses."""
    return FakeScreen
