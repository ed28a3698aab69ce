"""Render the task file as a bordered table."""

from __future__ import annotations

from typing import IO, Iterable, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from todolist.tasks import get_tasks


def build_table(rows: Iterable[Sequence[str]]) -> Table:
    """Lay out every row, header included, as cells of a bordered table."""
    rows = [list(row) for row in rows]
    table = Table(box=box.SQUARE, show_header=False, show_lines=True)
    for _ in range(max((len(row) for row in rows), default=0)):
        table.add_column(overflow="fold")
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    return table


def view_tasks(stream: IO[str], console: Console | None = None) -> None:
    """Print the tasks in the stream, header included, as a table."""
    rows = get_tasks(stream, True)
    (console or Console()).print(build_table(rows))