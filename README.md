# todolist

A small command-line to-do list. Tasks are kept in `todo.csv` in the current directory. The file is created the first time the `todo` command runs, and an empty file is given the header row `ID,Task,Done`.

## Installation

```
pip install .
```

## Usage

Add a task:

```
todo --create "Buy milk"
```

Each new task gets an ID one higher than the highest ID already in the file (the first task gets 1). New tasks start as not done. `--create` may be given more than once to add several tasks in one run, in the order given. An empty task text is refused.

Print all tasks, including the header row, as a bordered table:

```
todo --view
```

Both options can be given in the same command; tasks are created before the table is printed. The single-dash spellings `-create` and `-view` are accepted too.

The command exits with status 0 on success. If the file cannot be opened, a task text is empty, or `todo.csv` is malformed (an ID that is not a whole number, records with differing numbers of fields, broken quoting), it prints `todo: <reason>` to standard error and exits with status 1.

## The file format

`todo.csv` is a plain CSV file with CRLF line endings:

```
ID,Task,Done
1,Buy milk,false
2,Write report,false
```

Task texts that contain commas, quotes or line breaks, or that start with whitespace, are written in double quotes. New records are always appended at the end of the file.

## Using it from Python

`todolist.tasks` works on any open, seekable text stream:

```python
import io
from todolist.tasks import init_csv_file, new_task, create_task, get_tasks

stream = io.StringIO()
init_csv_file(stream)
task = new_task(stream, "Buy milk")   # Task(id=1, task='Buy milk', done=False)
create_task(stream, task)
print(get_tasks(stream, include_header=False))  # [['1', 'Buy milk', 'false']]
```

- `Task` is a dataclass with `id`, `task` and `done`.
- `init_csv_file(stream)` writes the header row.
- `get_highest_task_id(stream)` returns the largest ID in the file, or 0 when there are no tasks.
- `new_task(stream, task)` makes a pending `Task` with the next ID; it does not write it.
- `create_task(stream, task)` appends the task as a record.
- `get_tasks(stream, include_header)` returns the records as lists of strings.

These functions raise `ValueError` for a missing stream, a file without a header, or malformed contents.

`todolist.view` has `build_table(rows)`, which returns a `rich` table of the given rows, and `view_tasks(stream, console=None)`, which prints the stream's records, header included, to the given console or a new one.

`todolist.cli` has `get_args(argv, stream, console=None)`, which acts on a command line (program name first) against an open stream and returns the list of tasks it created, `open_task_file(name)`, which opens a file for reading and appending, and `main(argv=None)`, the entry point of the `todo` command.

## What it does not do

Tasks can only be added and listed. There is no command to mark a task done, edit it or delete it; that has to be done by editing `todo.csv` by hand. The table is printed once to the terminal and is not an interactive screen.

## Running the tests

```
pip install .[test]
pytest
```