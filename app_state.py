import logging
from enum import Enum

from keymap import ENTER_EDIT, LEAVE_EDIT, NEXT_TAB, PREVIOUS_TAB, QUIT, Keymap
from tab_set import TabSet
from text_field import TextField


logger = logging.getLogger(__name__)


class Focus(Enum):
    NAVIGATION = "navigation"
    EDITING = "editing"


class AppState:
    """Top-level UI state: the tab set, the input field and who gets keys.

    One key event is dispatched per tick. While editing, every key except
    the leave-edit key goes to the text field, including the quit key.
    """

    def __init__(self, tabs=None, keymap=None):
        self.running = True
        self.focus = Focus.NAVIGATION
        self.tabs = TabSet(tabs)
        self.input = TextField()
        self.keymap = keymap if keymap is not None else Keymap()

    @property
    def editing(self) -> bool:
        return self.focus is Focus.EDITING

    def handle_event(self, event):
        if not event.is_press:
            return
        if self.focus is Focus.EDITING:
            self._handle_editing(event)
        else:
            self._handle_navigation(event)

    def _handle_navigation(self, event):
        action = self.keymap.action_for(event.code)
        if action == NEXT_TAB:
            self.tabs.next()
            logger.debug("tab -> %s", self.tabs.current_tab())
        elif action == PREVIOUS_TAB:
            self.tabs.previous()
            logger.debug("tab -> %s", self.tabs.current_tab())
        elif action == QUIT:
            self.quit()
        elif action == ENTER_EDIT:
            self.input.set_focus(True)
            self.focus = Focus.EDITING
            logger.debug("focus -> editing")

    def _handle_editing(self, event):
        if event.code in self.keymap.keys_for(LEAVE_EDIT):
            self.input.set_focus(False)
            self.focus = Focus.NAVIGATION
            logger.debug("focus -> navigation")
            return
        self.input.handle_key(event)

    def quit(self):
        self.running = False
        logger.debug("quit requested")
