import curses

import pytest

from app_state import AppState, Focus
from key_input import InputReadError
from orchestrator import Orchestrator
from tab_set import Panel
from test_renderer import DummyWin


class FakeScreen(DummyWin):
    def __init__(self, keys, h=24, w=80):
        super().__init__(h, w)
        self.keys = list(keys)
        self.frames = []

    def keypad(self, flag):
        self.keypad_on = flag

    def nodelay(self, flag):
        self.nodelay_on = flag

    def timeout(self, delay):
        self.delay = delay

    def refresh(self):
        super().refresh()
        self.frames.append(self.text())

    def get_wch(self):
        if not self.keys:
            raise curses.error("no input")
        return self.keys.pop(0)


def test_loop_runs_until_quit():
    screen = FakeScreen(["l", "i", "h", "q", "\x1b", "q", "never read"])
    state = AppState()
    Orchestrator(screen, state).run()

    assert state.running is False
    assert state.focus is Focus.NAVIGATION
    assert state.tabs.current_tab() is Panel.ACCOUNT
    assert state.input.get_buffer() == "hq"
    assert screen.keys == ["never read"]
    # one frame up front plus one per event
    assert len(screen.frames) == 7
    assert screen.delay == -1
    assert screen.keypad_on is True


def test_frame_reflects_latest_event():
    screen = FakeScreen(["l", "i", "x", "\x1b", "q"])
    Orchestrator(screen, AppState()).run()
    assert "x│" in screen.frames[3]
    assert "Esc to stop editing" in screen.frames[3]
    assert "x│" not in screen.frames[4]


def test_resize_only_redraws():
    screen = FakeScreen([curses.KEY_RESIZE, "q"])
    state = AppState()
    Orchestrator(screen, state).run()
    assert state.running is False
    assert len(screen.frames) == 3


def test_read_failure_propagates():
    screen = FakeScreen(["l"])
    state = AppState()
    with pytest.raises(InputReadError):
        Orchestrator(screen, state).run()
    assert state.tabs.current_tab() is Panel.ACCOUNT
    assert state.running is True
