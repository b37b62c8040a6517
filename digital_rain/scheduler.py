"""
Frame Scheduler - Fixed-rate main loop driving input, simulation and drawing.

One iteration polls input, handles a resize, advances and draws the rain
unless paused, presents the frame and then sleeps for a fixed interval of
1/fps seconds. The sleep is not shortened by the time spent working, so
the achieved rate can fall slightly below the target.
"""

import logging
import random
import time
from typing import Callable, Optional

from .colors import Colors, Palette
from .columns import ColumnSimulator
from .models import RainSettings, RainState
from .renderer import RainRenderer
from .terminal import InputHandler, KeyAction, TerminalSession

logger = logging.getLogger(__name__)


class FrameScheduler:
    """Owns the loop state and paces frames."""

    def __init__(self, screen, settings: RainSettings,
                 palette: Optional[Palette] = None,
                 rng: Optional[random.Random] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.screen = screen
        self.settings = settings
        self.rng = rng or random.Random(settings.seed)
        self.sleep = sleep
        self.simulator = ColumnSimulator(settings, self.rng)
        self.renderer = RainRenderer(screen, settings, palette or Palette(), self.rng)
        self.input = InputHandler(screen, self.simulator)

        width, height = self.input.dimensions()
        self.state = RainState(
            columns=self.simulator.initial_columns(width, height),
            width=width,
            height=height,
        )

    def handle_action(self, action: KeyAction):
        """Apply a key action to the loop state."""
        if action is KeyAction.QUIT:
            logger.info("Quit requested")
            self.state.running = False
        elif action is KeyAction.PAUSE:
            paused = self.state.toggle_pause()
            logger.debug(f"Paused: {paused}")

    def step(self):
        """Run one frame without sleeping."""
        self.handle_action(self.input.poll_key())
        if not self.state.running:
            return
        self.input.check_resize(self.state)
        if not self.state.paused:
            self.simulator.update(self.state)
            self.renderer.render(self.state)
        self.renderer.present()
        self.state.frame += 1

    def run(self, max_frames: Optional[int] = None):
        """Loop until quit (or max_frames iterations, when given)."""
        interval = self.settings.frame_interval
        logger.info(f"Rain started: {self.state.width}x{self.state.height} at {self.settings.fps} fps")
        try:
            while self.state.running:
                self.step()
                if not self.state.running:
                    break
                if max_frames is not None and self.state.frame >= max_frames:
                    break
                self.sleep(interval)
        except KeyboardInterrupt:
            self.state.running = False
        logger.info(f"Rain stopped after {self.state.frame} frames")


def run_rain(settings: RainSettings):
    """
    Run the rain in a curses session until the user quits.

    The terminal is restored before this returns or raises.

    Raises:
        ColumnAllocationError: if the column list cannot be allocated
        TerminalUnavailableError: if curses cannot drive the terminal
    """
    with TerminalSession() as screen:
        scheduler = FrameScheduler(screen, settings, palette=Colors.palette(settings.bold))
        scheduler.run()
