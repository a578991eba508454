import numpy as np
import pandas as pd

EMPTY_OMIT = "omit"
EMPTY_PLACEHOLDER = "placeholder"

PLACEHOLDER_ROW = ("", "", "No commands found")


def format_age(ts, now) -> str:
    """Compact age that fits the 4-wide Time column: now, 5m, 3h, 2d."""
    if ts is None or pd.isna(ts):
        return ""
    seconds = (pd.Timestamp(now) - pd.Timestamp(ts)).total_seconds()
    if seconds < 60:
        return "now"
    if seconds < 3600:
        return f"{int(seconds // 60)}m"
    if seconds < 86400:
        return f"{int(seconds // 3600)}h"
    return f"{int(seconds // 86400)}d"


def to_visible_row(record, now):
    return (
        format_age(record.time, now),
        str(record.directory),
        str(record.command),
    )


def is_placeholder(row) -> bool:
    return tuple(row) == PLACEHOLDER_ROW


def match_positions(df: pd.DataFrame, query: str) -> np.ndarray:
    """Positional indexes of rows whose command contains query literally."""
    if not query:
        return np.arange(len(df))
    mask = df["command"].astype(str).str.contains(query, regex=False)
    return np.flatnonzero(mask.to_numpy(dtype=bool))


def filter_rows(df: pd.DataFrame, query: str, empty_policy=EMPTY_PLACEHOLDER, now=None):
    if empty_policy not in (EMPTY_OMIT, EMPTY_PLACEHOLDER):
        raise ValueError(f"Unknown empty result policy: {empty_policy!r}")
    now = pd.Timestamp.now() if now is None else now

    matched = df.iloc[match_positions(df, query)]
    rows = [to_visible_row(rec, now) for rec in matched.itertuples(index=False)]

    if not rows and empty_policy == EMPTY_PLACEHOLDER:
        return [PLACEHOLDER_ROW]
    return rows
