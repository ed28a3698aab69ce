"""Command line for adding and viewing tasks in ``todo.csv``."""

from __future__ import annotations

import argparse
import io
import os
import sys
from typing import IO, Sequence

from rich.console import Console

from todolist.tasks import Task, create_task, init_csv_file, new_task
from todolist.view import view_tasks

CSV_FILE_NAME = "todo.csv"


def open_task_file(name: str) -> IO[str]:
    """Open the task file for reading and appending, creating it if needed."""
    return open(name, "a+", newline="", encoding="utf-8")


def _parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description="Keep a list of tasks.")
    parser.add_argument(
        "-create",
        "--create",
        action="append",
        default=[],
        metavar="TASK",
        help="Create a task",
    )
    parser.add_argument("-view", "--view", action="store_true", help="View tasks")
    return parser


def get_args(
    argv: Sequence[str] | None, stream: IO[str], console: Console | None = None
) -> list[Task]:
    """Act on the command line (program name first) and return the created tasks."""
    argv = list(sys.argv if argv is None else argv)
    prog = os.path.basename(argv[0]) if argv else "todo"
    options = _parser(prog).parse_args(argv[1:])

    created = []
    for text in options.create:
        if not text:
            raise ValueError("task text must not be empty")
        task = new_task(stream, text)
        create_task(stream, task)
        created.append(task)

    if options.view:
        view_tasks(stream, console)
    return created


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command on ``todo.csv`` in the working directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        with open_task_file(CSV_FILE_NAME) as stream:
            if stream.seek(0, io.SEEK_END) == 0:
                init_csv_file(stream)
            get_args(["todo", *args], stream)
    except (OSError, ValueError) as exc:
        print(f"todo: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())