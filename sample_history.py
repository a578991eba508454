from dataclasses import dataclass

import pandas as pd

COLUMNS = ["time", "directory", "command"]

# (directory, command), oldest last
SAMPLE_COMMANDS = [
    ("~/git/betterstack", "git push"),
    ("~/git/betterstack", "git commit"),
    ("~/git/betterstack", "git push --force"),
    ("~/git/betterstack", "git commit --message 'fix: fix something'"),
    ("~/git/betterstack", "git rebase"),
    ("~/git/betterstack", "git stash"),
    ("~/git/betterstack", "git pull"),
    ("~/git/betterstack", "bin/dev"),
    ("~/git/logtail", "git push"),
    ("~/git/logtail", "git commit"),
    ("~/git/logtail", "git rebase"),
    ("~/git/logtail", "git merge"),
    ("~/git/logtail", "git cherry-pick"),
    ("~/git/logtail", "bin/dev-server"),
    ("~/git/uptime", "git commit"),
    ("~/git/uptime", "git push --force"),
    ("~/git/uptime", "git merge"),
    ("~/git/uptime", "git push"),
    ("~/git/uptime", "git commit -m 'fix: fix something'"),
    ("~/git/uptime", "bin/dev-server"),
    ("~", "netstat -tlnp"),
    ("~", "ps aux"),
    ("~", "top"),
    ("~", "htop"),
    ("~", "ls -la"),
    ("~", "tree dotfiles"),
    ("~", "tree .config"),
    ("~", "ncdu -x"),
    ("~", "du -sh *"),
    ("~", "du -sh .config/*"),
    ("~", "man curl"),
]


@dataclass(frozen=True)
class HistoryRecord:
    time: pd.Timestamp
    directory: str
    command: str


def records_to_df(records) -> pd.DataFrame:
    """Dataset frame in record order; callers treat it as read-only."""
    records = list(records)
    return pd.DataFrame(
        {
            "time": pd.to_datetime([r.time for r in records]),
            "directory": pd.Series([r.directory for r in records], dtype=object),
            "command": pd.Series([r.command for r in records], dtype=object),
        },
        columns=COLUMNS,
    )


class SampleHistoryInitializer:
    # spacing between consecutive sample entries, newest first
    STEP = pd.Timedelta(minutes=7)

    def __init__(self, entries=None):
        self.entries = list(SAMPLE_COMMANDS if entries is None else entries)

    def records(self, now=None) -> list[HistoryRecord]:
        now = pd.Timestamp.now() if now is None else pd.Timestamp(now)
        return [
            HistoryRecord(time=now - self.STEP * i, directory=d, command=c)
            for i, (d, c) in enumerate(self.entries)
        ]

    def create(self, now=None) -> pd.DataFrame:
        return records_to_df(self.records(now))
