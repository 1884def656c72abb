"""
Plain Text Tables.

Aligned, header-labeled tables for command output. Unlike Rich tables
the output is fixed ASCII with no terminal-dependent wrapping, so it is
stable across terminals and safe to pipe or assert on in tests.

Usage:
    table = Table(["Application", "State", "Ip"])
    table.add_row(["blog", "started", "10.0.0.1"])
    stream.write(table.render())

Output:
    | Application | State   | Ip       |
    | blog        | started | 10.0.0.1 |
"""

from collections.abc import Iterable, Sequence

DELIMITER = "|"
PADDING = " "


class Table:
    """Rows of strings rendered under a header row, columns left-aligned."""

    def __init__(self, headers: Sequence[str]) -> None:
        self.headers: list[str] = [str(h) for h in headers]
        self.rows: list[list[str]] = []

    def add_row(self, row: Iterable[str]) -> None:
        """Append a row. Its width must match the header."""
        cells = [str(cell) for cell in row]
        if len(cells) != len(self.headers):
            raise ValueError(
                f"Row has {len(cells)} columns, expected {len(self.headers)}"
            )
        self.rows.append(cells)

    def column_widths(self) -> list[int]:
        """Widest cell per column, header included."""
        widths = [len(h) for h in self.headers]
        for row in self.rows:
            for index, cell in enumerate(row):
                widths[index] = max(widths[index], len(cell))
        return widths

    def _format_row(self, row: Sequence[str], widths: Sequence[int]) -> str:
        cells = [
            f"{PADDING}{cell.ljust(width)}{PADDING}"
            for cell, width in zip(row, widths)
        ]
        return DELIMITER + DELIMITER.join(cells) + DELIMITER + "\n"

    def render(self) -> str:
        """Render the header followed by every row, one per line."""
        widths = self.column_widths()
        lines = [self._format_row(self.headers, widths)]
        lines.extend(self._format_row(row, widths) for row in self.rows)
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __bytes__(self) -> bytes:
        return self.render().encode("utf-8")

    def __len__(self) -> int:
        return len(self.rows)
