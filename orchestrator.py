import curses
import logging

from key_input import read_key_event
from renderer import default_styles, draw_frame


logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, app_state, styles=None):
        self.stdscr = stdscr
        self.state = app_state
        self.styles = styles or default_styles()
        try:
            # the text field draws its own cursor marker
            curses.curs_set(0)
        except curses.error:
            pass
        try:
            curses.raw()
        except curses.error:
            pass
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        # block for input with no timeout
        self.stdscr.timeout(-1)

    def redraw(self):
        draw_frame(self.stdscr, self.state, self.styles)

    def run(self):
        logger.info("session started")
        self.redraw()
        while self.state.running:
            event = read_key_event(self.stdscr)
            if event.code != "resize":
                self.state.handle_event(event)
            self.redraw()
        logger.info("session ended")
