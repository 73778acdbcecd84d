NEXT_TAB = "next_tab"
PREVIOUS_TAB = "previous_tab"
QUIT = "quit"
ENTER_EDIT = "enter_edit"
LEAVE_EDIT = "leave_edit"

ACTIONS = (NEXT_TAB, PREVIOUS_TAB, QUIT, ENTER_EDIT, LEAVE_EDIT)

DEFAULT_BINDINGS = {
    NEXT_TAB: ["l", "right"],
    PREVIOUS_TAB: ["h", "left"],
    QUIT: ["q"],
    ENTER_EDIT: ["i"],
    LEAVE_EDIT: ["esc"],
}


class Keymap:
    """Maps key codes to navigation actions.

    Bindings not given fall back to DEFAULT_BINDINGS. When the same key is
    bound to more than one action, the action listed first in ACTIONS wins.
    """

    def __init__(self, bindings=None):
        merged = {action: list(keys) for action, keys in DEFAULT_BINDINGS.items()}
        for action, keys in (bindings or {}).items():
            if action not in ACTIONS:
                raise KeyError(f"unknown action: {action}")
            merged[action] = list(keys)
        self.bindings = merged

        self._lookup: dict[str, str] = {}
        for action in ACTIONS:
            for key in merged[action]:
                self._lookup.setdefault(key, action)

    def action_for(self, code):
        return self._lookup.get(code)

    def keys_for(self, action) -> list[str]:
        return list(self.bindings.get(action, []))
