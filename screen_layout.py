from dataclasses import dataclass


TITLE_W = 20


@dataclass(frozen=True)
class Rect:
    y: int
    x: int
    height: int
    width: int

    def inner(self, pad_x=0):
        """Area inside a one-cell border, with optional horizontal padding."""
        return Rect(
            self.y + 1,
            self.x + 1 + pad_x,
            max(0, self.height - 2),
            max(0, self.width - 2 - 2 * pad_x),
        )


class ScreenLayout:
    def __init__(self, height, width):
        self.H = max(0, height)
        self.W = max(0, width)

        # layout: header (1 line), body (rest), footer hint (1 line)
        self.header_h = min(1, self.H)
        self.footer_h = min(1, max(0, self.H - self.header_h))
        self.body_h = max(0, self.H - self.header_h - self.footer_h)

        self.body = Rect(self.header_h, 0, self.body_h, self.W)
        self.footer = Rect(self.header_h + self.body_h, 0, self.footer_h, self.W)

        # header splits into tab bar and a fixed-width title on the right
        title_w = min(TITLE_W, self.W)
        self.tabs = Rect(0, 0, self.header_h, self.W - title_w)
        self.title = Rect(0, self.W - title_w, self.header_h, title_w)

    @classmethod
    def for_window(cls, win):
        h, w = win.getmaxyx()
        return cls(h, w)

    @staticmethod
    def account_fields(area):
        """Stack the account panel rows inside ``area``.

        Returns id label, id value, name label and input box rects; the
        blank spacer row and the remaining filler are not returned.
        """
        rows = []
        y = area.y
        bottom = area.y + area.height
        for h in (1, 1, 1, 1, 3):
            h = max(0, min(h, bottom - y))
            rows.append(Rect(y, area.x, h, area.width))
            y += h
        id_label, id_value, _, name_label, input_box = rows
        return id_label, id_value, name_label, input_box
