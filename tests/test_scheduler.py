"""
Tests for the Frame Scheduler module.

Tests quit and pause handling, frame pacing, resize during the loop and
terminal restoration around run_rain().
"""

import os
import random
import sys
from dataclasses import replace
from unittest.mock import MagicMock, patch

import pytest


# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from digital_rain import scheduler as scheduler_module
from digital_rain.colors import Palette
from digital_rain.errors import ColumnAllocationError
from digital_rain.models import RainSettings
from digital_rain.scheduler import FrameScheduler, run_rain


def make_scheduler(screen, sleep=None, **settings) -> FrameScheduler:
    settings.setdefault("seed", 42)
    return FrameScheduler(
        screen,
        RainSettings(**settings),
        palette=Palette(background=1, trail=2, trail_dim=3, head=4),
        rng=random.Random(settings["seed"]),
        sleep=sleep or MagicMock(),
    )


def snapshot(scheduler):
    return [replace(c) for c in scheduler.state.columns]


# ===========================================================================
# Setup Tests
# ===========================================================================

class TestSetup:
    def test_columns_sized_to_terminal(self, make_screen):
        scheduler = make_scheduler(make_screen(57, 19))
        assert scheduler.state.width == 57
        assert scheduler.state.height == 19
        assert len(scheduler.state.columns) == 57

    def test_initial_state(self, make_screen):
        state = make_scheduler(make_screen()).state
        assert state.running is True
        assert state.paused is False
        assert state.frame == 0


# ===========================================================================
# Quit Tests
# ===========================================================================

class TestQuit:
    @pytest.mark.parametrize("key", [ord('q'), 27])
    def test_quit_key_stops_loop(self, make_screen, key):
        sleep = MagicMock()
        screen = make_screen(keys=[-1, -1, key, ord('p')])
        scheduler = make_scheduler(screen, sleep=sleep)
        scheduler.run()
        assert scheduler.state.running is False
        assert scheduler.state.frame == 2
        assert sleep.call_count == 2
        # Key after quit is never read
        assert screen.keys == [ord('p')]

    def test_keyboard_interrupt_stops_loop(self, make_screen):
        sleep = MagicMock(side_effect=KeyboardInterrupt)
        scheduler = make_scheduler(make_screen(), sleep=sleep)
        scheduler.run()
        assert scheduler.state.running is False
        assert scheduler.state.frame == 1


# ===========================================================================
# Pause Tests
# ===========================================================================

class TestPause:
    def test_state_frozen_while_paused(self, make_screen):
        screen = make_screen(keys=[ord('p')])
        scheduler = make_scheduler(screen, density=1.0, speed=2.0)
        before = snapshot(scheduler)
        for _ in range(25):
            scheduler.step()
        assert scheduler.state.paused is True
        assert snapshot(scheduler) == before
        # Frames are still presented while paused
        assert screen.refresh_count == 25
        assert screen.writes == []

    def test_pause_twice_resumes(self, make_screen):
        screen = make_screen(keys=[ord('p'), ord('P')])
        scheduler = make_scheduler(screen, density=1.0, speed=2.0)
        before = snapshot(scheduler)
        scheduler.step()
        assert scheduler.state.paused is True
        scheduler.step()
        assert scheduler.state.paused is False
        assert snapshot(scheduler) != before

    def test_unpaused_frames_draw(self, make_screen):
        screen = make_screen()
        scheduler = make_scheduler(screen, density=1.0)
        scheduler.step()
        assert screen.writes
        assert screen.refresh_count == 1


# ===========================================================================
# Pacing Tests
# ===========================================================================

class TestPacing:
    @pytest.mark.parametrize("fps,interval", [(5, 0.1), (60, 1.0 / 60), (1000, 1.0 / 240)])
    def test_fixed_sleep_interval(self, make_screen, fps, interval):
        sleep = MagicMock()
        scheduler = make_scheduler(make_screen(), sleep=sleep, fps=fps)
        scheduler.run(max_frames=4)
        assert scheduler.state.frame == 4
        assert sleep.call_count == 3
        for call in sleep.call_args_list:
            assert call.args == (pytest.approx(interval),)


# ===========================================================================
# Resize Tests
# ===========================================================================

class TestResizeInLoop:
    def test_resize_before_drawing(self, make_screen):
        screen = make_screen(80, 24)
        scheduler = make_scheduler(screen, density=1.0)
        scheduler.step()
        screen.width, screen.height = 30, 12
        screen.writes.clear()
        scheduler.step()
        assert scheduler.state.width == 30
        assert len(scheduler.state.columns) == 30
        assert screen.clear_count == 1
        assert all(x < 30 and y < 12 for y, x, _, _ in screen.writes)

    def test_allocation_failure_ends_loop(self, make_screen):
        screen = make_screen(80, 24)
        scheduler = make_scheduler(screen)
        screen.width = 100
        with patch.object(scheduler.simulator, "resize_columns",
                          side_effect=ColumnAllocationError(100, "resize")):
            with pytest.raises(ColumnAllocationError):
                scheduler.run()


# ===========================================================================
# run_rain Tests
# ===========================================================================

class TestRunRain:
    def _session(self, screen):
        session = MagicMock()
        session.__enter__.return_value = screen
        session.__exit__.return_value = False
        return session

    def test_quit_restores_terminal(self, make_screen):
        session = self._session(make_screen(keys=[ord('q')]))
        with patch.object(scheduler_module, "TerminalSession", return_value=session), \
                patch.object(scheduler_module.Colors, "palette", return_value=Palette()):
            run_rain(RainSettings(seed=1))
        session.__exit__.assert_called_once()
        assert session.__exit__.call_args.args[0] is None

    def test_allocation_failure_restores_terminal(self, make_screen):
        session = self._session(make_screen())
        with patch.object(scheduler_module, "TerminalSession", return_value=session), \
                patch.object(scheduler_module.Colors, "palette", return_value=Palette()), \
                patch.object(scheduler_module.ColumnSimulator, "initial_columns",
                             side_effect=ColumnAllocationError(80, "startup")):
            with pytest.raises(ColumnAllocationError):
                run_rain(RainSettings(seed=1))
        session.__exit__.assert_called_once()
        assert session.__exit__.call_args.args[0] is ColumnAllocationError

    def test_bold_setting_selects_palette(self, make_screen):
        session = self._session(make_screen(keys=[ord('q')]))
        with patch.object(scheduler_module, "TerminalSession", return_value=session), \
                patch.object(scheduler_module.Colors, "palette", return_value=Palette()) as palette:
            run_rain(RainSettings(bold=True))
        palette.assert_called_once_with(True)
