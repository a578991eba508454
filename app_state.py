import pandas as pd

from config_paths import BrowserConfig
from history_filter import filter_rows
from history_table import HistoryTable
from screen_layout import ScreenLayout
from search_pane import SearchPane

# size assumed until the terminal reports its own
INITIAL_WIDTH = 80
INITIAL_TABLE_HEIGHT = 20


class AppState:
    def __init__(self, df: pd.DataFrame, config: BrowserConfig | None = None, now=None):
        self.config = config or BrowserConfig()
        self.layout = ScreenLayout(self.config)
        self._df = df
        self.now = now

        self.search = SearchPane(char_limit=self.config.char_limit)
        self.table = HistoryTable(
            columns=self.layout.columns(INITIAL_WIDTH),
            rows=self.rows_for(""),
            height=INITIAL_TABLE_HEIGHT,
        )

        self.terminal_size: tuple[int, int] | None = None  # (width, height)
        self.mouse_event = None
        self.mouse_seen = False
        self.error: Exception | None = None

        self.exit_requested = False
        self.exit_code = 0

    @property
    def df(self):
        return self._df

    def rows_for(self, query):
        return filter_rows(
            self._df,
            query,
            empty_policy=self.config.empty_result_policy,
            now=self.now,
        )

    def refilter(self):
        self.table.set_rows(self.rows_for(self.search.value()))

    def apply_size(self, width, height):
        self.terminal_size = (width, height)
        self.table.set_columns(self.layout.columns(width))
        self.table.set_height(self.layout.viewport_height(height))
