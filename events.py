import curses
from dataclasses import dataclass

KEY_ESC = 27
KEY_CTRL_C = 3
EXIT_KEYS = (10, 13, curses.KEY_ENTER, KEY_CTRL_C, KEY_ESC)


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Key:
    code: int
    # set for printable characters; code is then ord(text)
    text: str = ""


@dataclass(frozen=True)
class Mouse:
    x: int
    y: int
    kind: str


@dataclass(frozen=True)
class Tick:
    timestamp: float


@dataclass(frozen=True)
class ErrorEvent:
    error: Exception


# checked in order; first match names the event
_MOUSE_KINDS = [
    ("BUTTON1_PRESSED", "left press"),
    ("BUTTON1_RELEASED", "left release"),
    ("BUTTON1_CLICKED", "left click"),
    ("BUTTON1_DOUBLE_CLICKED", "left double click"),
    ("BUTTON2_PRESSED", "middle press"),
    ("BUTTON2_RELEASED", "middle release"),
    ("BUTTON2_CLICKED", "middle click"),
    ("BUTTON3_PRESSED", "right press"),
    ("BUTTON3_RELEASED", "right release"),
    ("BUTTON3_CLICKED", "right click"),
    ("BUTTON4_PRESSED", "wheel up"),
    ("BUTTON5_PRESSED", "wheel down"),
    ("REPORT_MOUSE_POSITION", "motion"),
]


def describe_mouse(bstate):
    for name, label in _MOUSE_KINDS:
        flag = getattr(curses, name, 0)
        if flag and bstate & flag:
            return label
    return "unknown"


def read_event(stdscr):
    """Block for the next key and turn it into an event; None on timeout."""
    try:
        ch = stdscr.get_wch()
    except curses.error:
        return None

    if isinstance(ch, str):
        code = ord(ch)
        if ch.isprintable():
            return Key(code, text=ch)
        return Key(code)

    if ch == curses.KEY_RESIZE:
        try:
            curses.update_lines_cols()
        except curses.error:
            pass
        h, w = stdscr.getmaxyx()
        return Resize(width=w, height=h)

    if ch == curses.KEY_MOUSE:
        try:
            _, mx, my, _, bstate = curses.getmouse()
        except curses.error as e:
            return ErrorEvent(e)
        return Mouse(x=mx, y=my, kind=describe_mouse(bstate))

    return Key(ch)
