"""SQLite-backed storage for to-do items."""

from __future__ import annotations

import sqlite3
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from pathlib import Path
from typing import Iterable, Protocol

DEFAULT_DB_PATH = "todo.db"
DEFAULT_ERROR_LOG = "error.txt"
DELETE_DELAY_SECONDS = 60 * 60

_SCHEMA = """
CREATE TABLE IF NOT EXISTS todos (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    created_at TEXT,
    updated_at TEXT,
    deleted_at TEXT,
    title TEXT UNIQUE,
    description TEXT,
    status INTEGER
)
"""


class Status(IntEnum):
    """Completion state of a to-do item."""

    PENDING = 0
    COMPLETE = 1


@dataclass
class ListTodo:
    """A to-do item as shown to the user."""

    title: str
    description: str
    status: Status = Status.PENDING


class Sleeper(Protocol):
    def sleep(self) -> None: ...


class DefaultSleeper:
    """Waits one hour before a completed item is removed."""

    def sleep(self) -> None:
        time.sleep(DELETE_DELAY_SECONDS)


def write_error(err: BaseException, text: str, path: str | Path = DEFAULT_ERROR_LOG) -> None:
    """Append the failing input and the error message to the error log."""
    with open(path, "a", encoding="utf-8") as log:
        log.write(f"For Input: {text}\n")
        log.write(f"{err}\n")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class TodoDB:
    """To-do store; deletions are soft, as rows keep a deletion timestamp."""

    def __init__(
        self,
        path: str | Path = DEFAULT_DB_PATH,
        error_log: str | Path = DEFAULT_ERROR_LOG,
    ) -> None:
        self.path = path
        self.error_log = error_log
        self._lock = threading.RLock()
        self._closed = False
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        with self._lock, self._conn:
            self._conn.execute(_SCHEMA)

    def __enter__(self) -> TodoDB:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        with self._lock:
            if not self._closed:
                self._closed = True
                self._conn.close()

    def create_todo(self, todo: ListTodo) -> None:
        """Insert a pending item; failures are appended to the error log."""
        stamp = _now()
        try:
            with self._lock, self._conn:
                self._conn.execute(
                    "INSERT INTO todos (created_at, updated_at, title, description, status)"
                    " VALUES (?, ?, ?, ?, ?)",
                    (stamp, stamp, todo.title, todo.description, int(Status.PENDING)),
                )
        except sqlite3.IntegrityError as err:
            write_error(err, todo.title, self.error_log)

    def update_status(self, todo: ListTodo) -> None:
        """Toggle the item's status; completed items are removed after a delay."""
        with self._lock, self._conn:
            row = self._conn.execute(
                "SELECT id, status FROM todos WHERE title = ? AND deleted_at IS NULL"
                " ORDER BY id LIMIT 1",
                (todo.title,),
            ).fetchone()
            if row is None:
                return
            row_id, status = row
            new_status = Status((status + 1) % 2)
            self._conn.execute(
                "UPDATE todos SET status = ?, updated_at = ? WHERE id = ?",
                (int(new_status), _now(), row_id),
            )
        if new_status is Status.COMPLETE:
            threading.Thread(
                target=self.delete_queue,
                args=(todo, DefaultSleeper()),
                daemon=True,
            ).start()

    def delete_queue(self, todo: ListTodo, sleeper: Sleeper) -> None:
        """Wait using the sleeper, then soft-delete every item with the title."""
        sleeper.sleep()
        with self._lock:
            if self._closed:
                return
            with self._conn:
                self._conn.execute(
                    "UPDATE todos SET deleted_at = ? WHERE title = ? AND deleted_at IS NULL",
                    (_now(), todo.title),
                )

    def update_todos(self, todos: Iterable[ListTodo]) -> None:
        """Replace the stored items with the given ones, all pending."""
        self.flush()
        for todo in todos:
            self.create_todo(todo)

    def read_todos(self) -> list[ListTodo]:
        with self._lock:
            rows = self._conn.execute(
                "SELECT title, description, status FROM todos"
                " WHERE deleted_at IS NULL ORDER BY id"
            ).fetchall()
        return [ListTodo(title, description, Status(status)) for title, description, status in rows]

    def flush(self) -> None:
        """Drop all items, including soft-deleted ones."""
        with self._lock, self._conn:
            self._conn.execute("DROP TABLE IF EXISTS todos")
            self._conn.execute(_SCHEMA)