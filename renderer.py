import curses

from screen_layout import ScreenLayout
from status_bar import render_footer
from tab_set import Panel


TITLE = "Tempchat v1"
CHANNEL_TEXT = "Channel content here"
USER_ID_LABEL = "User ID"
USER_ID_VALUE = "usr_a1b2c3d4e5f6"
NAME_LABEL = "Name"
INPUT_TITLE = "Input"

SQUARE = ("┌", "┐", "└", "┘", "─", "│")
ROUNDED = ("╭", "╮", "╰", "╯", "─", "│")

PAIR_TAB_ACTIVE = 1
PAIR_TAB_INACTIVE = 2
PAIR_ACCENT = 3
PAIR_VALUE = 4


def default_styles():
    return {
        "title": curses.A_BOLD,
        "tab_active": curses.A_REVERSE | curses.A_BOLD,
        "tab_inactive": curses.A_NORMAL,
        "border": curses.A_NORMAL,
        "accent": curses.A_BOLD,
        "label": curses.A_DIM,
        "value": curses.A_BOLD,
        "focused": curses.A_BOLD,
        "text": curses.A_NORMAL,
    }


def init_styles():
    """Build attributes from color pairs, falling back to plain attributes."""
    styles = default_styles()
    try:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_TAB_ACTIVE, curses.COLOR_WHITE, curses.COLOR_BLUE)
        curses.init_pair(PAIR_TAB_INACTIVE, curses.COLOR_WHITE, -1)
        curses.init_pair(PAIR_ACCENT, curses.COLOR_CYAN, -1)
        curses.init_pair(PAIR_VALUE, curses.COLOR_YELLOW, -1)
    except curses.error:
        return styles
    styles.update(
        tab_active=curses.color_pair(PAIR_TAB_ACTIVE) | curses.A_BOLD,
        tab_inactive=curses.color_pair(PAIR_TAB_INACTIVE),
        accent=curses.color_pair(PAIR_ACCENT),
        value=curses.color_pair(PAIR_VALUE) | curses.A_BOLD,
        focused=curses.color_pair(PAIR_ACCENT),
    )
    return styles


# ---------------- drawing helpers ----------------

def safe_addstr(win, y, x, text, attr=0, max_w=None):
    """Write text clipped to the window (and to ``max_w`` columns)."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w:
        return
    limit = w - x if max_w is None else min(max_w, w - x)
    if limit <= 0 or not text:
        return
    try:
        win.addnstr(y, x, text, limit, attr)
    except curses.error:
        # writing the bottom-right cell moves the cursor off-screen
        pass


def draw_box(win, rect, title="", attr=0, glyphs=SQUARE):
    if rect.height < 2 or rect.width < 2:
        return
    tl, tr, bl, br, horiz, vert = glyphs
    inner_w = rect.width - 2
    safe_addstr(win, rect.y, rect.x, tl + horiz * inner_w + tr, attr)
    for row in range(rect.y + 1, rect.y + rect.height - 1):
        safe_addstr(win, row, rect.x, vert, attr)
        safe_addstr(win, row, rect.x + rect.width - 1, vert, attr)
    safe_addstr(win, rect.y + rect.height - 1, rect.x, bl + horiz * inner_w + br, attr)
    if title:
        safe_addstr(win, rect.y, rect.x + 1, title, attr, max_w=inner_w)


# ---------------- bands ----------------

def draw_tabs(win, rect, tabs, styles):
    if rect.height <= 0:
        return
    x = rect.x
    right = rect.x + rect.width
    for idx, title in enumerate(tabs.titles()):
        label = f"  {title}  "
        attr = styles["tab_active"] if idx == tabs.current else styles["tab_inactive"]
        safe_addstr(win, rect.y, x, label, attr, max_w=max(0, right - x))
        x += len(label) + 1  # divider
        if x >= right:
            break


def draw_title(win, rect, styles):
    if rect.height <= 0:
        return
    safe_addstr(win, rect.y, rect.x, TITLE, styles["title"], max_w=rect.width)


def draw_footer(win, rect, state):
    if rect.height <= 0:
        return
    text = render_footer(state.editing, rect.width, state.keymap)
    safe_addstr(win, rect.y, rect.x, text)


# ---------------- panels ----------------

def draw_channel(win, rect, styles):
    draw_box(win, rect, attr=styles["border"], glyphs=ROUNDED)
    inner = rect.inner(pad_x=1)
    if inner.height > 0:
        safe_addstr(win, inner.y, inner.x, CHANNEL_TEXT, max_w=inner.width)


def draw_input(win, rect, field, styles):
    attr = styles["focused"] if field.focused else styles["text"]
    draw_box(win, rect, title=INPUT_TITLE, attr=attr)
    inner = rect.inner()
    if inner.height > 0:
        safe_addstr(win, inner.y, inner.x, field.visible_slice(inner.width), attr)


def draw_account(win, rect, field, styles):
    draw_box(win, rect, title=" Account ", attr=styles["accent"])
    inner = rect.inner()
    id_label, id_value, name_label, input_box = ScreenLayout.account_fields(inner)
    if id_label.height:
        safe_addstr(win, id_label.y, id_label.x, USER_ID_LABEL, styles["label"], max_w=id_label.width)
    if id_value.height:
        safe_addstr(win, id_value.y, id_value.x, USER_ID_VALUE, styles["value"], max_w=id_value.width)
    if name_label.height:
        safe_addstr(win, name_label.y, name_label.x, NAME_LABEL, styles["label"], max_w=name_label.width)
    draw_input(win, input_box, field, styles)


def draw_panel(win, rect, state, styles):
    panel = state.tabs.current_tab()
    if panel is Panel.CHANNEL:
        draw_channel(win, rect, styles)
    elif panel is Panel.ACCOUNT:
        draw_account(win, rect, state.input, styles)


def draw_frame(win, state, styles=None):
    """Draw the whole screen for ``state``. Reads state, never changes it."""
    styles = styles or default_styles()
    layout = ScreenLayout.for_window(win)
    win.erase()
    draw_tabs(win, layout.tabs, state.tabs, styles)
    draw_title(win, layout.title, styles)
    draw_panel(win, layout.body, state, styles)
    draw_footer(win, layout.footer, state)
    win.refresh()
