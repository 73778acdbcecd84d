from enum import Enum


class Panel(Enum):
    CHANNEL = "Channel"
    ACCOUNT = "Account"

    @property
    def title(self) -> str:
        return self.value


class TabSet:
    """Ordered panels with a clamped current index.

    Stepping past either end leaves the index where it is; it never wraps.
    """

    def __init__(self, tabs=None):
        tabs = tuple(Panel) if tabs is None else tuple(tabs)
        if not tabs:
            raise ValueError("TabSet needs at least one tab")
        self.tabs = tabs
        self.current = 0

    def next(self):
        if self.current < len(self.tabs) - 1:
            self.current += 1

    def previous(self):
        if self.current > 0:
            self.current -= 1

    def current_tab(self):
        return self.tabs[self.current]

    def titles(self) -> list[str]:
        return [tab.title if isinstance(tab, Panel) else str(tab) for tab in self.tabs]
