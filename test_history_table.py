import unittest

from history_table import DOWN, NO_SELECTION, UP, HistoryTable


def _rows(n):
    return [(f"{i}m", "~", f"cmd {i}") for i in range(n)]


class HistoryTableCursorTests(unittest.TestCase):
    def test_starts_on_first_row(self):
        table = HistoryTable(rows=_rows(3))
        self.assertEqual(table.cursor, 0)
        self.assertEqual(table.selected_row(), _rows(3)[0])

    def test_empty_table_has_no_selection(self):
        table = HistoryTable(rows=[])
        self.assertEqual(table.cursor, NO_SELECTION)
        self.assertIsNone(table.selected_row())

    def test_move_down_at_last_row_is_noop(self):
        table = HistoryTable(rows=_rows(3), height=5)
        table.move_down()
        table.move_down()
        self.assertEqual(table.cursor, 2)
        table.move_down()
        self.assertEqual(table.cursor, 2)

    def test_move_up_at_first_row_is_noop(self):
        table = HistoryTable(rows=_rows(3))
        table.move_up()
        self.assertEqual(table.cursor, 0)

    def test_move_cursor_by_direction(self):
        table = HistoryTable(rows=_rows(3))
        table.move_cursor(DOWN)
        self.assertEqual(table.cursor, 1)
        table.move_cursor(UP)
        self.assertEqual(table.cursor, 0)
        with self.assertRaises(ValueError):
            table.move_cursor("sideways")

    def test_navigation_on_empty_table_keeps_sentinel(self):
        table = HistoryTable(rows=[])
        table.move_down()
        table.move_up()
        self.assertEqual(table.cursor, NO_SELECTION)


class HistoryTableSetRowsTests(unittest.TestCase):
    def test_cursor_index_is_kept_when_rows_change(self):
        table = HistoryTable(rows=_rows(5), height=10)
        table.move_down()
        table.move_down()
        replacement = [("now", "/tmp", c) for c in "abcd"]
        table.set_rows(replacement)
        # same index, different record
        self.assertEqual(table.cursor, 2)
        self.assertEqual(table.selected_row(), replacement[2])

    def test_cursor_clamped_to_shorter_rows(self):
        table = HistoryTable(rows=_rows(5), height=10)
        for _ in range(4):
            table.move_down()
        table.set_rows(_rows(2))
        self.assertEqual(table.cursor, 1)

    def test_empty_rows_give_sentinel_then_first_row_again(self):
        table = HistoryTable(rows=_rows(5))
        table.move_down()
        table.set_rows([])
        self.assertEqual(table.cursor, NO_SELECTION)
        table.set_rows(_rows(3))
        self.assertEqual(table.cursor, 0)

    def test_set_rows_copies_input(self):
        rows = _rows(2)
        table = HistoryTable(rows=rows)
        rows.append(("x", "y", "z"))
        self.assertEqual(len(table.rows), 2)


class HistoryTableViewportTests(unittest.TestCase):
    def test_viewport_follows_cursor_down(self):
        table = HistoryTable(rows=_rows(10), height=3)
        for _ in range(5):
            table.move_down()
        shown = [i for i, _ in table.visible_rows()]
        self.assertEqual(shown, [3, 4, 5])

    def test_viewport_follows_cursor_up(self):
        table = HistoryTable(rows=_rows(10), height=3)
        for _ in range(9):
            table.move_down()
        for _ in range(8):
            table.move_up()
        shown = [i for i, _ in table.visible_rows()]
        self.assertEqual(shown[0], 1)
        self.assertIn(table.cursor, shown)

    def test_growing_height_pulls_offset_back(self):
        table = HistoryTable(rows=_rows(10), height=3)
        for _ in range(9):
            table.move_down()
        table.set_height(8)
        shown = [i for i, _ in table.visible_rows()]
        self.assertEqual(shown, list(range(2, 10)))

    def test_height_never_below_one(self):
        table = HistoryTable(rows=_rows(3), height=0)
        self.assertEqual(table.height, 1)
        table.set_height(-4)
        self.assertEqual(table.height, 1)
        self.assertEqual(len(table.visible_rows()), 1)

    def test_set_columns_leaves_rows_alone(self):
        table = HistoryTable(rows=_rows(3))
        table.move_down()
        table.set_columns([("Time", 4)])
        self.assertEqual(table.columns, [("Time", 4)])
        self.assertEqual(table.cursor, 1)


if __name__ == "__main__":
    unittest.main()
