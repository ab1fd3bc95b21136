"""Command line entry point: add, edit and list tasks."""

from __future__ import annotations

import argparse
import datetime as dt
import sqlite3
import sys
from collections.abc import Sequence
from pathlib import Path

from kondo.config import Configuration, load_configuration
from kondo.content_parser import parse_task
from kondo.database import connect, insert_task, migrate
from kondo.list_ui import open_task_editor, run
from kondo.task import Task

DB_FILE = "kondo.db"
_VERSION = "0.1.0a1"


def _parse_date(value: str) -> dt.date:
    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid date {value!r}, expected YYYY-MM-DD"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the add, edit and list commands."""
    parser = argparse.ArgumentParser(
        prog="kondo", description="Keep track of tasks and their deadlines."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    add_parser = commands.add_parser("add", help="add a task")
    add_parser.add_argument("-d", "--date", type=_parse_date, metavar="DATE")
    add_parser.add_argument("-c", "--content", metavar="CONTENT")

    edit_parser = commands.add_parser("edit", help="edit a task file")
    edit_parser.add_argument("-f", "--file-name", required=True, metavar="FILE")

    commands.add_parser("list", help="show all tasks")
    return parser


def _default_deadline_days(configuration: Configuration) -> int:
    text = configuration.kondo.default_deadline
    if not (text.isascii() and text.isdigit()):
        raise ValueError("default_deadline is non-numeric")
    return int(text)


def add(
    conn: sqlite3.Connection,
    configuration: Configuration,
    date: dt.date | None = None,
    content: str | None = None,
    today: dt.date | None = None,
) -> Task | None:
    """Store a new task and return it, or return ``None`` when nothing is stored.

    With neither a date nor content the task is written in the editor, starting
    from the default deadline. With only one of them nothing happens.
    """
    days = _default_deadline_days(configuration)
    if date is None and content is None:
        start = today if today is not None else dt.datetime.now(dt.timezone.utc).date()
        draft = Task(start + dt.timedelta(days=days), "")
        task = open_task_editor(draft, configuration.kondo.editor)
    elif date is not None and content is not None:
        task = Task(date, content)
    else:
        return None
    task.id = insert_task(conn, task)
    return task


def _edit(file_name: str, editor: str) -> Task:
    path = Path(file_name)
    task = parse_task(path.read_text(encoding="utf-8"))
    edited = open_task_editor(task, editor)
    path.write_text(f"[{edited.deadline.isoformat()}]\n{edited.content}\n", encoding="utf-8")
    return edited


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line program."""
    configuration = load_configuration()
    conn = connect(DB_FILE)
    try:
        try:
            migrate(conn)
        except sqlite3.Error as exc:
            print(f"Couldn't complete database setup.\n{exc}", file=sys.stderr)
        else:
            print("Database setup complete.")

        args = build_parser().parse_args(argv)
        if args.command == "add":
            add(conn, configuration, args.date, args.content)
        elif args.command == "edit":
            _edit(args.file_name, configuration.kondo.editor)
        else:
            run(conn)
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())