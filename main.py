import curses
import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from app_state import AppState
from orchestrator import Orchestrator
from sample_history import SampleHistoryInitializer

try:
    from _version import __version__
except ImportError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

USAGE = "reshui - search your shell history\n\nUsage:\n  reshui\n  reshui -v\n  reshui -h\n"


class StartupFailure(Exception):
    """The terminal UI could not be started."""


def configure_logging(config):
    level = getattr(logging, config.log_level, logging.WARNING)
    root = logging.getLogger()
    root.setLevel(level)
    if not config_paths.ensure_config_dirs():
        return
    try:
        handler = logging.FileHandler(config_paths.LOG_PATH, encoding="utf-8")
    except OSError as e:
        print(f"reshui: cannot open log file: {e}", file=sys.stderr)
        return
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root.addHandler(handler)


def _require_tty():
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise StartupFailure("stdin and stdout must be a terminal")


def run_browser(config):
    _require_tty()
    state = AppState(SampleHistoryInitializer().create(), config)

    def curses_main(stdscr):
        return Orchestrator(stdscr, state).run()

    try:
        return curses.wrapper(curses_main)
    except curses.error as e:
        raise StartupFailure(f"terminal initialization failed: {e}") from e


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args:
        print(USAGE)
        return 0

    config = config_paths.load_config()
    configure_logging(config)

    try:
        rc = run_browser(config)
    except StartupFailure as e:
        logger.error("startup failed: %s", e)
        print(f"reshui: {e}", file=sys.stderr)
        return 1
    return rc or 0


if __name__ == "__main__":
    sys.exit(main())
