import sqlite3
from unittest import mock

import pytest

from cantdo.db import (
    DELETE_DELAY_SECONDS,
    DefaultSleeper,
    ListTodo,
    Status,
    TodoDB,
    write_error,
)

SAMPLES = [
    ListTodo("Write the report", "Draft is due on Friday.", Status.PENDING),
    ListTodo("Water the plants", "Both balconies.", Status.PENDING),
]


class SpySleeper:
    def __init__(self):
        self.calls = 0

    def sleep(self):
        self.calls += 1


@pytest.fixture
def db(tmp_path):
    store = TodoDB(tmp_path / "todo.db", tmp_path / "error.txt")
    yield store
    store.close()


def test_create_and_read(db):
    for todo in SAMPLES:
        db.create_todo(todo)
    assert db.read_todos() == SAMPLES


def test_update_status_and_delete(db):
    for todo in SAMPLES:
        db.create_todo(todo)
    db.update_status(SAMPLES[0])
    read = db.read_todos()
    assert read[0].status is Status.COMPLETE

    spy = SpySleeper()
    db.delete_queue(SAMPLES[1], spy)
    assert spy.calls == 1
    assert [t.title for t in db.read_todos()] == [SAMPLES[0].title]


def test_update_status_toggles_back(db):
    db.create_todo(SAMPLES[0])
    db.update_status(SAMPLES[0])
    db.update_status(SAMPLES[0])
    assert db.read_todos()[0].status is Status.PENDING


def test_update_status_unknown_title_changes_nothing(db):
    db.create_todo(SAMPLES[0])
    db.update_status(ListTodo("missing", "x"))
    assert db.read_todos() == [SAMPLES[0]]


def test_create_forces_pending(db):
    db.create_todo(ListTodo("done", "already", Status.COMPLETE))
    assert db.read_todos()[0].status is Status.PENDING


def test_duplicate_title_logged(db, tmp_path):
    db.create_todo(SAMPLES[0])
    db.create_todo(SAMPLES[0])
    assert len(db.read_todos()) == 1
    log = (tmp_path / "error.txt").read_text(encoding="utf-8")
    assert log.startswith(f"For Input: {SAMPLES[0].title}\n")
    assert "UNIQUE" in log


def test_deleted_title_still_reserved(db, tmp_path):
    db.create_todo(SAMPLES[0])
    db.delete_queue(SAMPLES[0], SpySleeper())
    db.create_todo(SAMPLES[0])
    assert db.read_todos() == []
    assert SAMPLES[0].title in (tmp_path / "error.txt").read_text(encoding="utf-8")


def test_update_todos_replaces_all(db):
    db.create_todo(ListTodo("old", "gone"))
    db.update_todos(SAMPLES)
    assert db.read_todos() == SAMPLES


def test_flush_empties(db):
    for todo in SAMPLES:
        db.create_todo(todo)
    db.flush()
    assert db.read_todos() == []
    db.create_todo(SAMPLES[0])
    assert db.read_todos() == [SAMPLES[0]]


def test_persists_across_connections(tmp_path):
    path = tmp_path / "todo.db"
    with TodoDB(path, tmp_path / "error.txt") as first:
        first.create_todo(SAMPLES[1])
    with TodoDB(path, tmp_path / "error.txt") as second:
        assert second.read_todos() == [SAMPLES[1]]


def test_closed_db_raises(tmp_path):
    with TodoDB(tmp_path / "todo.db", tmp_path / "error.txt") as store:
        store.create_todo(SAMPLES[0])
    with pytest.raises(sqlite3.ProgrammingError):
        store.read_todos()


def test_delete_queue_after_close_is_ignored(tmp_path):
    store = TodoDB(tmp_path / "todo.db", tmp_path / "error.txt")
    store.create_todo(SAMPLES[0])
    store.close()
    spy = SpySleeper()
    store.delete_queue(SAMPLES[0], spy)
    assert spy.calls == 1
    with TodoDB(tmp_path / "todo.db", tmp_path / "error.txt") as again:
        assert again.read_todos() == [SAMPLES[0]]


def test_write_error_appends(tmp_path):
    path = tmp_path / "err.txt"
    write_error(ValueError("boom"), "first", path)
    write_error(ValueError("bang"), "second", path)
    assert path.read_text(encoding="utf-8") == (
        "For Input: first\nboom\nFor Input: second\nbang\n"
    )


def test_default_sleeper_waits_one_hour():
    with mock.patch("time.sleep", return_value=None) as fake_sleep:
        result = DefaultSleeper().sleep()
    assert result is None
    assert fake_sleep.call_count == 1
    assert fake_sleep.call_args == mock.call(3600)
    assert fake_sleep.call_args == mock.call(DELETE_DELAY_SECONDS)