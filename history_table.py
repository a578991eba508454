NO_SELECTION = -1

UP = "up"
DOWN = "down"


class HistoryTable:
    """Rows, cursor and viewport of the history table.

    The cursor is an index into ``rows``. It survives ``set_rows`` by index,
    so after the query changes it may point at a different record.
    """

    def __init__(self, columns=None, rows=None, height=1):
        self.columns = list(columns or [])
        self.rows = []
        self.height = max(1, height)
        self.cursor = NO_SELECTION
        self.offset = 0
        self.set_rows(rows or [])

    # ---------- layout ----------
    def set_columns(self, columns):
        self.columns = list(columns)

    def set_height(self, height):
        self.height = max(1, height)
        self._clamp_offset()

    # ---------- rows ----------
    def set_rows(self, rows):
        self.rows = list(rows)
        if not self.rows:
            self.cursor = NO_SELECTION
        elif self.cursor == NO_SELECTION:
            self.cursor = 0
        else:
            self.cursor = min(self.cursor, len(self.rows) - 1)
        self._clamp_offset()

    def selected_row(self):
        if self.cursor == NO_SELECTION:
            return None
        return self.rows[self.cursor]

    # ---------- navigation ----------
    def move_up(self):
        if self.cursor == NO_SELECTION:
            return
        self.cursor = max(0, self.cursor - 1)
        self._clamp_offset()

    def move_down(self):
        if self.cursor == NO_SELECTION:
            return
        self.cursor = min(len(self.rows) - 1, self.cursor + 1)
        self._clamp_offset()

    def move_cursor(self, direction):
        if direction == UP:
            self.move_up()
        elif direction == DOWN:
            self.move_down()
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

    # ---------- viewport ----------
    def _clamp_offset(self):
        if not self.rows:
            self.offset = 0
            return
        max_offset = max(0, len(self.rows) - self.height)
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.height:
            self.offset = self.cursor - self.height + 1
        self.offset = max(0, min(self.offset, max_offset))

    def visible_rows(self):
        end = min(len(self.rows), self.offset + self.height)
        return [(i, self.rows[i]) for i in range(self.offset, end)]
