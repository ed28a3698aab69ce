import csv
import io

import pytest

from todolist.tasks import (
    Task,
    create_task,
    get_highest_task_id,
    get_tasks,
    init_csv_file,
    new_task,
)


def make_csv(rows):
    stream = io.StringIO()
    init_csv_file(stream)
    csv.writer(stream, lineterminator="\n").writerows(rows)
    return stream


@pytest.mark.parametrize(
    "rows, text, expected",
    [
        (
            [["1", "Task one", "false"], ["2", "Task two", "false"], ["3", "Task three", "false"]],
            "Task 4",
            Task(id=4, task="Task 4", done=False),
        ),
        ([], "Task", Task(id=1, task="Task", done=False)),
        (
            [["3", "Task one", "false"], ["8", "two", "false"], ["6", "Task three", "false"]],
            "Task",
            Task(id=9, task="Task", done=False),
        ),
    ],
    ids=["happy path", "empty file", "random ids"],
)
def test_new_task(rows, text, expected):
    assert new_task(make_csv(rows), text) == expected


def test_new_task_invalid_id():
    stream = make_csv(
        [["asd", "Task one", "false"], ["8", "two", "false"], ["6", "Task three", "false"]]
    )
    with pytest.raises(ValueError):
        new_task(stream, "Task")


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([["1", "Task one", "false"]], 1),
        ([["2", "Task two", "false"]], 2),
        ([["1", "Task one", "false"], ["2", "Task two", "false"], ["3", "Task three", "false"]], 3),
        ([["2", "Task", "false"], ["3", "Task", "false"], ["1", "Task", "false"]], 3),
    ],
)
def test_get_highest_task_id(rows, expected):
    assert get_highest_task_id(make_csv(rows)) == expected


def test_get_highest_task_id_invalid():
    with pytest.raises(ValueError):
        get_highest_task_id(make_csv([["invalidID", "Task", "false"]]))


def test_get_highest_task_id_empty_file():
    with pytest.raises(ValueError, match="header"):
        get_highest_task_id(io.StringIO())


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([["1", "Task one", "false"]], [["1", "Task one", "false"]]),
        (
            [["1", "Task one", "false"], ["2", "Task two", "false"]],
            [["1", "Task one", "false"], ["2", "Task two", "false"]],
        ),
        ([], []),
    ],
)
def test_get_tasks(rows, expected):
    assert get_tasks(make_csv(rows), False) == expected


def test_get_tasks_with_header():
    stream = make_csv([["1", "Task one", "false"]])
    assert get_tasks(stream, True) == [["ID", "Task", "Done"], ["1", "Task one", "false"]]


def test_get_tasks_rejects_ragged_rows():
    stream = make_csv([["1", "Task one"]])
    with pytest.raises(ValueError, match="number of fields"):
        get_tasks(stream, False)


def test_init_csv_file_writes_header():
    stream = io.StringIO()
    init_csv_file(stream)
    assert stream.getvalue() == "ID,Task,Done\r\n"


@pytest.mark.parametrize(
    "task, expected",
    [
        (Task(id=1, task="Task", done=False), "1,Task,false\r\n"),
        (Task(id=2, task="Task word", done=False), "2,Task word,false\r\n"),
        (Task(id=3, task="", done=True), "3,,true\r\n"),
        (Task(id=4, task="a, b", done=False), '4,"a, b",false\r\n'),
        (Task(id=5, task=' say "hi"', done=False), '5," say ""hi""",false\r\n'),
        (Task(id=6, task="two\nlines", done=False), '6,"two\r\nlines",false\r\n'),
    ],
)
def test_create_task_format(task, expected):
    stream = io.StringIO()
    create_task(stream, task)
    assert stream.getvalue() == expected


def test_create_task_round_trip(tmp_path):
    path = tmp_path / "todo.csv"
    with open(path, "a+", newline="", encoding="utf-8") as stream:
        init_csv_file(stream)
        for text in ["first", "with, comma", 'quoted "word"']:
            create_task(stream, new_task(stream, text))
        assert get_tasks(stream, False) == [
            ["1", "first", "false"],
            ["2", "with, comma", "false"],
            ["3", 'quoted "word"', "false"],
        ]
    assert path.read_bytes().startswith(b"ID,Task,Done\r\n1,first,false\r\n")


def test_none_stream_rejected():
    with pytest.raises(ValueError):
        get_tasks(None, True)