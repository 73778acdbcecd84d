from wcwidth import wcwidth

CURSOR_GLYPH = "│"


def char_width(ch):
    # control characters report -1; they take no cells here
    return max(0, wcwidth(ch))


def cell_width(text):
    return sum(char_width(ch) for ch in text)


class TextField:
    def __init__(self):
        self.buffer = ""
        self.cursor = 0
        self.focused = False

    # ---------- state helpers ----------
    def set_focus(self, focused):
        self.focused = bool(focused)

    def get_buffer(self):
        return self.buffer

    # ---------- edit operations ----------
    def insert(self, ch):
        """Insert ``ch`` at the cursor and move the cursor past it.

        ``ch`` is normally one character; a longer string is inserted as a
        whole and the cursor advances by its length.
        """
        if not self.focused:
            return
        self.buffer = self.buffer[: self.cursor] + ch + self.buffer[self.cursor :]
        self.cursor += len(ch)

    def delete_before_cursor(self):
        if not self.focused or self.cursor == 0:
            return
        self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
        self.cursor -= 1

    def delete_at_cursor(self):
        if not self.focused or self.cursor >= len(self.buffer):
            return
        self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]

    def move_left(self):
        if not self.focused:
            return
        self.cursor = max(0, self.cursor - 1)

    def move_right(self):
        if not self.focused:
            return
        self.cursor = min(len(self.buffer), self.cursor + 1)

    def move_home(self):
        if not self.focused:
            return
        self.cursor = 0

    def move_end(self):
        if not self.focused:
            return
        self.cursor = len(self.buffer)

    # ---------- input handling ----------
    def handle_key(self, event):
        if not self.focused:
            return

        code = event.code
        if event.is_char:
            if code.isprintable():
                self.insert(code)
            return

        if code == "backspace":
            self.delete_before_cursor()
        elif code == "delete":
            self.delete_at_cursor()
        elif code == "left":
            self.move_left()
        elif code == "right":
            self.move_right()
        elif code == "home":
            self.move_home()
        elif code == "end":
            self.move_end()

    # ---------- rendering ----------
    def display_text(self):
        if not self.focused:
            return self.buffer
        return self.buffer[: self.cursor] + CURSOR_GLYPH + self.buffer[self.cursor :]

    def visible_slice(self, width):
        """Return the part of the display text that fits in ``width`` cells.

        Wide characters take two cells. When the text does not fit, the
        window is shifted so the cursor marker stays visible. Nothing on the
        field is modified.
        """
        text = self.display_text()
        if width <= 0:
            return ""
        if cell_width(text) <= width:
            return text

        # grow a window around the cursor marker (or the first character)
        anchor = self.cursor if self.focused else 0
        start = anchor
        used = char_width(text[anchor])
        if used > width:
            return ""
        while start > 0 and used + char_width(text[start - 1]) <= width:
            start -= 1
            used += char_width(text[start])
        end = anchor + 1
        while end < len(text) and used + char_width(text[end]) <= width:
            used += char_width(text[end])
            end += 1
        return text[start:end]
