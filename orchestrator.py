import curses
import logging
import sys

from events import (
    EXIT_KEYS,
    ErrorEvent,
    Key,
    Mouse,
    Resize,
    Tick,
    read_event,
)
from frame_renderer import TITLE, Theme, init_theme, render_frame, search_text_width

logger = logging.getLogger(__name__)

# xterm any-event mouse tracking; curses only turns on button tracking
_MOUSE_ALL_MOTION_ON = "\033[?1003h"
_MOUSE_ALL_MOTION_OFF = "\033[?1003l"


class Orchestrator:
    def __init__(self, stdscr, app_state, theme=None):
        self.stdscr = stdscr
        self.state = app_state
        self.theme = theme or Theme()
        self.needs_clear = False

    # ---------------- terminal ----------------

    def _setup_terminal(self):
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        # raw: Ctrl+C arrives as key 3 instead of SIGINT
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        curses.mousemask(
            curses.ALL_MOUSE_EVENTS | getattr(curses, "REPORT_MOUSE_POSITION", 0)
        )
        curses.mouseinterval(0)
        self.theme = init_theme()
        self._write_escape(_MOUSE_ALL_MOTION_ON)
        self._write_escape(f"\033]0;{TITLE}\007")

    def _restore_terminal(self):
        self._write_escape(_MOUSE_ALL_MOTION_OFF)

    @staticmethod
    def _write_escape(seq):
        try:
            sys.stdout.write(seq)
            sys.stdout.flush()
        except OSError as e:
            logger.debug("Could not write terminal escape: %s", e)

    # ---------------- events ----------------

    def _scroll_search(self):
        width = self.state.terminal_size[0] if self.state.terminal_size else 80
        self.state.search.scroll_to_cursor(search_text_width(width))

    def dispatch(self, event):
        state = self.state

        if isinstance(event, Resize):
            logger.debug("resize to %dx%d", event.width, event.height)
            state.apply_size(event.width, event.height)
            self.needs_clear = True
            self._scroll_search()

        elif isinstance(event, Key):
            if event.text:
                state.search.handle_key(event.text)
                state.refilter()
            elif event.code in EXIT_KEYS:
                state.exit_requested = True
                state.exit_code = 0
            elif event.code == curses.KEY_UP:
                state.table.move_up()
            elif event.code == curses.KEY_DOWN:
                state.table.move_down()
            else:
                state.search.handle_key(event.code)
                state.refilter()
            self._scroll_search()

        elif isinstance(event, Mouse):
            state.mouse_seen = True
            state.mouse_event = event

        elif isinstance(event, ErrorEvent):
            logger.warning("runtime error: %s", event.error)
            state.error = event.error

        elif isinstance(event, Tick):
            pass

    # ---------------- UI ----------------

    def redraw(self):
        if self.needs_clear:
            self.stdscr.clear()
            self.needs_clear = False
        else:
            self.stdscr.erase()

        h, w = self.stdscr.getmaxyx()
        frame = render_frame(self.state, self.theme)
        for y, line in enumerate(frame.lines):
            if y >= h:
                break
            try:
                # the bottom-right cell raises even when the write succeeds
                self.stdscr.addnstr(y, 0, line.text, w, line.attr)
            except curses.error:
                pass

        cy, cx = frame.cursor
        try:
            self.stdscr.move(min(cy, h - 1), max(0, min(cx, w - 1)))
        except curses.error:
            pass
        self.stdscr.refresh()

    # ---------------- main loop ----------------

    def run(self):
        self._setup_terminal()
        try:
            h, w = self.stdscr.getmaxyx()
            self.dispatch(Resize(width=w, height=h))

            while not self.state.exit_requested:
                self.redraw()
                event = read_event(self.stdscr)
                if event is None:
                    continue
                self.dispatch(event)
        finally:
            self._restore_terminal()
        return self.state.exit_code
