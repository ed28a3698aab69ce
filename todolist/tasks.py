"""Task records kept in a CSV file with an ``ID,Task,Done`` header."""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass
from typing import IO, Iterable, Iterator

HEADER = ("ID", "Task", "Done")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_SPECIAL = (",", '"', "\r", "\n")


@dataclass
class Task:
    """A single to-do item."""

    id: int
    task: str
    done: bool = False


def _needs_quotes(field: str) -> bool:
    if field == "":
        return False
    if field == "\\.":
        return True
    if any(char in field for char in _SPECIAL):
        return True
    return field[0].isspace()


def _quote(field: str) -> str:
    if not _needs_quotes(field):
        return field
    escaped = field.replace('"', '""').replace("\r", "").replace("\n", "\r\n")
    return f'"{escaped}"'


def _write_record(stream: IO[str], fields: Iterable[str]) -> None:
    if stream is None:
        raise ValueError("no stream to write to")
    stream.seek(0, io.SEEK_END)
    stream.write(",".join(_quote(field) for field in fields) + "\r\n")
    stream.flush()


def _read_records(stream: IO[str]) -> Iterator[list[str]]:
    """Yield the non-blank records of the stream, from its start."""
    if stream is None:
        raise ValueError("no stream to read from")
    stream.seek(0)
    reader = csv.reader(stream, strict=True)
    width = None
    try:
        for record in reader:
            if not record:
                continue
            if width is None:
                width = len(record)
            elif len(record) != width:
                raise ValueError(
                    f"record on line {reader.line_num}: wrong number of fields"
                )
            yield record
    except csv.Error as exc:
        raise ValueError(f"malformed CSV on line {reader.line_num}: {exc}") from exc


def _task_rows(stream: IO[str]) -> list[list[str]]:
    records = _read_records(stream)
    if next(records, None) is None:
        raise ValueError("failed to read header: file is empty")
    return list(records)


def _parse_id(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"invalid task ID {value!r}")
    return int(value)


def init_csv_file(stream: IO[str]) -> None:
    """Write the header line to the stream."""
    if stream is None:
        raise ValueError("no stream to write to")
    stream.seek(0)
    _write_record(stream, HEADER)


def get_highest_task_id(stream: IO[str]) -> int:
    """Return the largest task ID in the file, or 0 when there is none."""
    return max((_parse_id(row[0]) for row in _task_rows(stream)), default=0)


def new_task(stream: IO[str], task: str) -> Task:
    """Make a pending task whose ID follows the highest one in the file."""
    return Task(id=get_highest_task_id(stream) + 1, task=task, done=False)


def create_task(stream: IO[str], task: Task) -> None:
    """Append the task as a record at the end of the file."""
    _write_record(stream, (str(task.id), task.task, "true" if task.done else "false"))


def get_tasks(stream: IO[str], include_header: bool = False) -> list[list[str]]:
    """Return the records of the file, with or without its header."""
    if include_header:
        return list(_read_records(stream))
    return _task_rows(stream)