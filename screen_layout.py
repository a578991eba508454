from typing import NamedTuple

TIME_WIDTH = 4
DIRECTORY_WIDTH = 20
# per cell: one space padding each side (3 * 2), plus the left and right border
CHROME_COLUMNS = 3 * 2 + 2
# non-table lines painted by frame_renderer.render_frame
CHROME_ROWS = 16


class Column(NamedTuple):
    label: str
    width: int


def compute_columns(
    width: int,
    chrome: int = CHROME_COLUMNS,
    time_width: int = TIME_WIDTH,
    directory_width: int = DIRECTORY_WIDTH,
) -> list[Column]:
    cmd_width = max(1, width - time_width - directory_width - chrome)
    return [
        Column("Time", time_width),
        Column("Directory", directory_width),
        Column("Command", cmd_width),
    ]


def compute_viewport_height(height: int, chrome: int = CHROME_ROWS) -> int:
    return max(1, height - chrome)


class ScreenLayout:
    """Column/row arithmetic for the configured chrome overheads."""

    def __init__(self, config=None):
        self.chrome_columns = getattr(config, "chrome_columns", CHROME_COLUMNS)
        self.chrome_rows = getattr(config, "chrome_rows", CHROME_ROWS)
        self.time_width = getattr(config, "time_width", TIME_WIDTH)
        self.directory_width = getattr(config, "directory_width", DIRECTORY_WIDTH)

    def columns(self, width: int) -> list[Column]:
        return compute_columns(
            width,
            chrome=self.chrome_columns,
            time_width=self.time_width,
            directory_width=self.directory_width,
        )

    def viewport_height(self, height: int) -> int:
        return compute_viewport_height(height, chrome=self.chrome_rows)

    @property
    def min_width(self) -> int:
        """Narrowest terminal for which the columns exactly fill the width."""
        return self.time_width + self.directory_width + self.chrome_columns + 1
