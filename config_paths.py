import json
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "reshui")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "reshui.log")

EMPTY_RESULT_POLICIES = ("omit", "placeholder")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BrowserConfig:
    empty_result_policy: str = "placeholder"
    chrome_columns: int = 8
    chrome_rows: int = 16
    time_width: int = 4
    directory_width: int = 20
    char_limit: int = 156
    log_level: str = "WARNING"


def ensure_config_dirs():
    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)
    except OSError as e:
        logger.warning("Could not create config dir %s: %s", CONFIG_DIR, e)
        return False
    return True


def _non_negative_int(value):
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def load_config():
    """
    Read CONFIG_JSON into a BrowserConfig. Missing file means defaults; any
    key with a wrong type or value is ignored and keeps its default.

    {
      "empty_result_policy": "omit" | "placeholder",
      "chrome_overhead": {"columns": 8, "rows": 16},
      "column_widths": {"time": 4, "directory": 20},
      "char_limit": 156,
      "log_level": "WARNING"
    }
    """
    cfg = {}

    if not os.path.exists(CONFIG_JSON):
        return BrowserConfig()

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, e)
        return BrowserConfig()

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", CONFIG_JSON)
        return BrowserConfig()

    policy = data.get("empty_result_policy")
    if policy in EMPTY_RESULT_POLICIES:
        cfg["empty_result_policy"] = policy
    elif policy is not None:
        logger.warning("Unknown empty_result_policy %r", policy)

    chrome = data.get("chrome_overhead")
    if isinstance(chrome, dict):
        cols = _non_negative_int(chrome.get("columns"))
        if cols is not None:
            cfg["chrome_columns"] = cols
        rows = _non_negative_int(chrome.get("rows"))
        if rows is not None:
            cfg["chrome_rows"] = rows

    widths = data.get("column_widths")
    if isinstance(widths, dict):
        time_w = _non_negative_int(widths.get("time"))
        if time_w:
            cfg["time_width"] = time_w
        dir_w = _non_negative_int(widths.get("directory"))
        if dir_w:
            cfg["directory_width"] = dir_w

    limit = _non_negative_int(data.get("char_limit"))
    if limit:
        cfg["char_limit"] = limit

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        cfg["log_level"] = level.upper()

    return BrowserConfig(**cfg)
