# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from athena.core.errors import PersistenceError
from athena.tasks.task_list import TaskList
from athena.tasks.task_models import Deadline, Event, Todo
from athena.tasks.task_store import TaskStore, record_to_task, task_to_record


def test_record_format() -> None:
    assert task_to_record(Todo("buy milk")) == "T|0|buy milk"
    assert (
        task_to_record(Deadline("return book", datetime(2024, 10, 15, 14, 0), is_done=True))
        == "D|1|return book|Oct 15 2024 02:00PM"
    )
    assert task_to_record(Event("concert", datetime(2024, 12, 2, 18, 0))) == (
        "E|0|concert|Dec 2 2024 06:00PM"
    )


def test_description_may_contain_separator() -> None:
    t = Deadline("a|b", datetime(2024, 1, 2, 3, 4))
    assert record_to_task(task_to_record(t)) == t
    assert record_to_task("T|0|x|y") == Todo("x|y")


def test_missing_file_loads_empty_list(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nope" / "athena.txt")
    assert store.has_existing_save() is False
    tl = store.load()
    assert tl.count() == 0
    assert tl.modified is False


def test_empty_file_loads_empty_list(tmp_path: Path) -> None:
    path = tmp_path / "athena.txt"
    path.write_text("", "utf-8")
    store = TaskStore(path)
    assert store.has_existing_save() is True
    assert store.load().count() == 0


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "data" / "athena.txt"
    store = TaskStore(path)

    tl = TaskList(
        [
            Todo("buy milk"),
            Deadline("return book", datetime(2024, 10, 15, 14, 0)),
            Event("concert", datetime(2024, 12, 2, 18, 0)),
        ]
    )
    tl.mark_done(2)
    store.save(tl)

    # Directory is created on first save; no temp file is left behind.
    assert path.is_file()
    assert sorted(p.name for p in path.parent.iterdir()) == ["athena.txt"]

    loaded = store.load()
    assert list(loaded) == list(tl)
    assert loaded.to_display_string() == tl.to_display_string()
    assert loaded.modified is False


def test_save_overwrites_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "athena.txt"
    store = TaskStore(path)
    store.save(TaskList([Todo("a"), Todo("b")]))
    store.save(TaskList([Todo("c")]))
    assert path.read_text("utf-8") == "T|0|c\n"


def test_blank_lines_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "athena.txt"
    path.write_text("T|0|a\n\nT|1|b\n", "utf-8")
    tl = TaskStore(path).load()
    assert [t.description for t in tl] == ["a", "b"]
    assert [t.is_done for t in tl] == [False, True]


@pytest.mark.parametrize(
    "line",
    [
        "X|0|mystery",
        "T|2|bad flag",
        "T|0",
        "T",
        "T|0|   ",
        "D|0|no date",
        "D|0|bad date|2/12/2024 1800",
        "E|1|bad date|Smarch 40 2024 99:99PM",
    ],
)
def test_malformed_record_fails_whole_load(tmp_path: Path, line: str) -> None:
    path = tmp_path / "athena.txt"
    path.write_text(f"T|0|fine\n{line}\n", "utf-8")
    with pytest.raises(PersistenceError) as info:
        TaskStore(path).load()
    assert ":2:" in str(info.value)


def test_undecodable_file_is_persistence_error(tmp_path: Path) -> None:
    path = tmp_path / "athena.txt"
    path.write_bytes(b"T|0|\xff\xfe\n")
    with pytest.raises(PersistenceError):
        TaskStore(path).load()


def test_write_failure_is_persistence_error(tmp_path: Path) -> None:
    # Parent "directory" is a regular file, so mkdir fails.
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    store = TaskStore(blocker / "athena.txt")
    with pytest.raises(PersistenceError):
        store.save(TaskList([Todo("a")]))


@pytest.mark.parametrize("year", [1, 99, 999, 1000, 9999])
def test_round_trip_boundary_years(tmp_path: Path, year: int) -> None:
    store = TaskStore(tmp_path / "athena.txt")
    tl = TaskList(
        [
            Deadline("old", datetime(year, 1, 1, 12, 0)),
            Event("older", datetime(year, 12, 31, 0, 30)),
        ]
    )
    store.save(tl)
    assert list(store.load()) == list(tl)


def test_failed_replace_leaves_no_temp_file(tmp_path: Path, monkeypatch) -> None:
    import athena.tasks.task_store as task_store

    path = tmp_path / "athena.txt"
    store = TaskStore(path)
    store.save(TaskList([Todo("kept")]))

    def broken_replace(src, dst):
        raise OSError("rename failed")

    monkeypatch.setattr(task_store.os, "replace", broken_replace)
    with pytest.raises(PersistenceError):
        store.save(TaskList([Todo("lost")]))

    assert sorted(p.name for p in tmp_path.iterdir()) == ["athena.txt"]
    assert path.read_text("utf-8") == "T|0|kept\n"
