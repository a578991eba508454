import curses

CHAR_LIMIT = 156


class SearchPane:
    def __init__(self, char_limit=CHAR_LIMIT, placeholder="Search commands"):
        self.char_limit = char_limit
        self.placeholder = placeholder
        self.buffer = ""
        self.cursor = 0
        self.hscroll = 0

    # ---------- state helpers ----------
    def value(self):
        return self.buffer

    def set_value(self, text):
        self.buffer = (text or "")[: self.char_limit]
        self.cursor = len(self.buffer)
        self.hscroll = 0

    def reset(self):
        self.set_value("")

    # ---------- editing ----------
    def insert_char(self, ch):
        if len(self.buffer) >= self.char_limit:
            return False
        self.buffer = self.buffer[: self.cursor] + ch + self.buffer[self.cursor :]
        self.cursor += 1
        return True

    def delete_char(self):
        if self.cursor == 0:
            return False
        self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
        self.cursor -= 1
        return True

    def delete_forward(self):
        if self.cursor >= len(self.buffer):
            return False
        self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
        return True

    def move_cursor_left(self):
        self.cursor = max(0, self.cursor - 1)

    def move_cursor_right(self):
        self.cursor = min(len(self.buffer), self.cursor + 1)

    def move_home(self):
        self.cursor = 0

    def move_end(self):
        self.cursor = len(self.buffer)

    def _word_boundary_left(self):
        i = self.cursor
        while i > 0 and self.buffer[i - 1].isspace():
            i -= 1
        while i > 0 and not self.buffer[i - 1].isspace():
            i -= 1
        return i

    def delete_word(self):
        start = self._word_boundary_left()
        if start == self.cursor:
            return False
        self.buffer = self.buffer[:start] + self.buffer[self.cursor :]
        self.cursor = start
        return True

    def kill_to_start(self):
        if self.cursor == 0:
            return False
        self.buffer = self.buffer[self.cursor :]
        self.cursor = 0
        return True

    # ---------- input handling ----------
    def handle_key(self, ch):
        """Apply one key; returns True when the query text changed.

        ch is a curses key code, or a str for a typed character (get_wch).
        """
        if isinstance(ch, str):
            if len(ch) == 1 and ch.isprintable():
                return self.insert_char(ch)
            return False

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            return self.delete_char()

        if ch == curses.KEY_DC:
            return self.delete_forward()

        if ch == 23:  # Ctrl+W, delete word backward
            return self.delete_word()

        if ch == 21:  # Ctrl+U, kill to line start
            return self.kill_to_start()

        if ch in (curses.KEY_LEFT, 2):  # Left or Ctrl+B
            self.move_cursor_left()
            return False

        if ch in (curses.KEY_RIGHT, 6):  # Right or Ctrl+F
            self.move_cursor_right()
            return False

        if ch in (curses.KEY_HOME, 1):  # Home or Ctrl+A
            self.move_home()
            return False

        if ch in (curses.KEY_END, 5):  # End or Ctrl+E
            self.move_end()
            return False

        if 32 <= ch <= 126:
            return self.insert_char(chr(ch))

        return False

    # ---------- rendering ----------
    def _scroll_for(self, width):
        width = max(1, width)
        scroll = self.hscroll
        if self.cursor < scroll:
            scroll = self.cursor
        elif self.cursor > scroll + width - 1:
            scroll = self.cursor - width + 1
        return max(0, min(scroll, len(self.buffer)))

    def scroll_to_cursor(self, width):
        """Persist the horizontal scroll that keeps the cursor inside width."""
        self.hscroll = self._scroll_for(width)

    def visible_text(self, width):
        """Slice of the buffer that fits in width, plus the cursor column in it."""
        scroll = self._scroll_for(width)
        visible = self.buffer[scroll : scroll + max(1, width)]
        return visible, self.cursor - scroll
