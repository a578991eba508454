import curses
from dataclasses import dataclass
from typing import NamedTuple

from history_filter import is_placeholder

TITLE = "RESH | Your Shell History"
HELP_TEXT = "(esc to quit, up/down to select)"
PROMPT = "> "
INDENT = "    "


@dataclass(frozen=True)
class Theme:
    """Curses attributes for each part of the frame. All zero renders plain text."""

    title: int = 0
    text: int = 0
    dim: int = 0
    border: int = 0
    header: int = 0
    selected: int = 0
    error: int = 0


PAIR_BORDER = 1
PAIR_SELECTED = 2
PAIR_ERROR = 3


def init_theme() -> Theme:
    """Set up color pairs once curses is running and return the theme."""
    border = 0
    selected = curses.A_REVERSE
    error = curses.A_BOLD
    try:
        curses.start_color()
        curses.use_default_colors()
        if curses.COLORS >= 256:
            curses.init_pair(PAIR_BORDER, 240, -1)
            curses.init_pair(PAIR_SELECTED, 229, 57)
        else:
            curses.init_pair(PAIR_BORDER, curses.COLOR_WHITE, -1)
            curses.init_pair(PAIR_SELECTED, curses.COLOR_YELLOW, curses.COLOR_BLUE)
        curses.init_pair(PAIR_ERROR, curses.COLOR_RED, -1)
        border = curses.color_pair(PAIR_BORDER)
        selected = curses.color_pair(PAIR_SELECTED)
        error = curses.color_pair(PAIR_ERROR) | curses.A_BOLD
    except curses.error:
        pass
    return Theme(
        title=curses.A_BOLD,
        text=curses.A_NORMAL,
        dim=curses.A_DIM,
        border=border,
        header=curses.A_BOLD | border,
        selected=selected,
        error=error,
    )


class FrameLine(NamedTuple):
    text: str
    attr: int = 0


class Frame(NamedTuple):
    lines: list
    cursor: tuple  # (y, x) of the search input cursor


def search_text_width(width):
    """Columns available to the query after the indent and prompt."""
    return max(1, width - len(INDENT) - len(PROMPT) - 1)


def _cell(text, width):
    return " " + str(text)[:width].ljust(width) + " "


def _table_line(cells, columns):
    return "│" + "".join(_cell(c, col.width) for c, col in zip(cells, columns)) + "│"


def _table_lines(table, theme):
    columns = table.columns
    inner = sum(col.width + 2 for col in columns)
    lines = [
        FrameLine("┌" + "─" * inner + "┐", theme.border),
        FrameLine(_table_line([col.label for col in columns], columns), theme.header),
        FrameLine("├" + "─" * inner + "┤", theme.border),
    ]

    shown = table.visible_rows()
    for idx, row in shown:
        attr = theme.selected if idx == table.cursor else theme.text
        if is_placeholder(row):
            attr = theme.dim
        lines.append(FrameLine(_table_line(row, columns), attr))
    blank_row = [""] * len(columns)
    for _ in range(table.height - len(shown)):
        lines.append(FrameLine(_table_line(blank_row, columns), theme.text))

    lines.append(FrameLine("└" + "─" * inner + "┘", theme.border))
    return lines


def selected_command(table):
    row = table.selected_row()
    if row is None or is_placeholder(row):
        return ""
    return row[2]


def render_frame(state, theme: Theme) -> Frame:
    width = state.terminal_size[0] if state.terminal_size else 80
    lines = [FrameLine(""), FrameLine(INDENT + TITLE, theme.title), FrameLine("")]

    if state.mouse_seen and state.mouse_event is not None:
        e = state.mouse_event
        lines.append(FrameLine(f"{INDENT}(X: {e.x}, Y: {e.y}) {e.kind}", theme.dim))
    else:
        lines.append(FrameLine(""))
    lines.append(FrameLine(""))

    query, cursor_col = state.search.visible_text(search_text_width(width))
    cursor = (len(lines), len(INDENT) + len(PROMPT) + cursor_col)
    if query:
        lines.append(FrameLine(INDENT + PROMPT + query, theme.text))
    else:
        lines.append(FrameLine(INDENT + PROMPT + state.search.placeholder, theme.dim))

    lines += [FrameLine(""), FrameLine(INDENT + HELP_TEXT, theme.dim), FrameLine("")]
    lines += _table_lines(state.table, theme)

    lines.append(FrameLine(""))
    command = selected_command(state.table)
    if command:
        lines.append(FrameLine(f"{INDENT}Selected: {command}", theme.text))
    else:
        lines.append(FrameLine(f"{INDENT}Nothing selected", theme.dim))

    if state.error is not None:
        lines.append(FrameLine(f"{INDENT}Error: {state.error}", theme.error))
    else:
        lines.append(FrameLine(""))

    return Frame(lines, cursor)
