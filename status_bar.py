from keymap import ENTER_EDIT, LEAVE_EDIT, NEXT_TAB, PREVIOUS_TAB, QUIT

ARROW_GLYPHS = {"left": "◄", "right": "►"}


def _key_label(keymap, action, default):
    keys = keymap.keys_for(action) if keymap is not None else []
    if not keys:
        return default
    # arrow keys read better than their letter aliases
    for key in keys:
        if key in ARROW_GLYPHS:
            return ARROW_GLYPHS[key]
    key = keys[0]
    return key if len(key) == 1 else key.capitalize()


def render_footer(editing, width, keymap=None):
    """Centered footer hint for the current focus, padded to ``width``."""
    if width <= 0:
        return ""
    if editing:
        text = f"{_key_label(keymap, LEAVE_EDIT, 'Esc')} to stop editing"
    else:
        prev_key = _key_label(keymap, PREVIOUS_TAB, "◄")
        next_key = _key_label(keymap, NEXT_TAB, "►")
        edit_key = _key_label(keymap, ENTER_EDIT, "i")
        quit_key = _key_label(keymap, QUIT, "q")
        text = f"{prev_key} {next_key} to change tab | {edit_key} to edit | Press {quit_key} to quit"
    return text.center(width)[:width]
