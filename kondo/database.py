"""Storage of tasks in an SQLite database."""

from __future__ import annotations

import sqlite3
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from kondo.task import Task

_SCHEMA = """
create table if not exists task (
    id integer primary key autoincrement,
    deadline text not null,
    content text not null,
    category text not null default '',
    done integer not null default 0
)
"""


def connect(path: Path | str) -> sqlite3.Connection:
    """Open (creating if needed) the database at ``path``."""
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    return conn


def migrate(conn: sqlite3.Connection) -> None:
    """Create the task table if it does not exist yet."""
    with conn:
        conn.execute(_SCHEMA)


def task_from_row(row: Mapping[str, Any] | sqlite3.Row) -> Task:
    """Build a task from a database row; raises ``ValueError`` on a bad deadline."""
    deadline = datetime.strptime(row["deadline"], "%Y-%m-%d").date()
    category = row["category"]
    return Task(
        deadline=deadline,
        content=str(row["content"]),
        id=int(row["id"]),
        category=None if category is None else str(category),
        done=row["done"] != 0,
    )


def insert_task(conn: sqlite3.Connection, task: Task) -> int:
    """Insert a task and return the id the database gave it."""
    with conn:
        cursor = conn.execute(
            "insert into task(deadline, content) values(?, ?)",
            (task.deadline.isoformat(), task.content),
        )
    return int(cursor.lastrowid)


def list_all(conn: sqlite3.Connection) -> list[Task]:
    """Return every stored task."""
    return [task_from_row(row) for row in conn.execute("select * from task")]