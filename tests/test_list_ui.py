import curses
import subprocess
from datetime import date
from pathlib import Path
from unittest import mock

import pytest

from kondo.content_parser import TaskParseError
from kondo.database import connect, insert_task, migrate
from kondo.list_ui import (
    HIGHLIGHT_SYMBOL,
    SEPARATOR,
    TITLE,
    TaskList,
    TaskWidget,
    open_task_editor,
    task_item_lines,
)
from kondo.task import Task


class FakeWindow:
    def __init__(self, height, width):
        self.height = height
        self.width = width
        self.rows = {}

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.rows.clear()

    def addnstr(self, y, x, text, n, attr=0):
        self.rows[y] = (text[:n], attr)


def make_tasks(count):
    return [Task(date(2025, 3, 12), f"Task {n}") for n in range(count)]


def test_task_item_lines():
    task = Task(date(2025, 3, 31), "This is a test task.\nsecond line")
    assert task_item_lines(task) == [
        "2025-03-31",
        "---------------------",
        "This is a test task.",
        "second line",
    ]


def test_task_item_lines_separator_constant():
    assert task_item_lines(Task(date(2025, 3, 12), ""))[1] == SEPARATOR


def test_select_next_from_nothing_and_clamps():
    tasks = TaskList(make_tasks(2))
    tasks.select_next()
    assert tasks.selected == 0
    tasks.select_next()
    tasks.select_next()
    assert tasks.selected == 1


def test_select_previous_from_nothing_picks_last():
    tasks = TaskList(make_tasks(3))
    tasks.select_previous()
    assert tasks.selected == 2
    tasks.select_previous()
    tasks.select_previous()
    tasks.select_previous()
    assert tasks.selected == 0


def test_empty_list_never_selects():
    tasks = TaskList([])
    tasks.select_next()
    assert tasks.selected is None
    tasks.select_previous()
    assert tasks.selected is None


def test_handle_key_moves_and_exits():
    widget = TaskWidget(make_tasks(3))
    widget.handle_key(curses.KEY_DOWN)
    widget.handle_key(curses.KEY_DOWN)
    assert widget.task_list.selected == 1
    widget.handle_key(curses.KEY_UP)
    assert widget.task_list.selected == 0
    assert widget.exit is False
    widget.handle_key("\x1b")
    assert widget.exit is True


def test_handle_key_ignores_other_keys():
    widget = TaskWidget(make_tasks(2))
    widget.handle_key("q")
    widget.handle_key(curses.KEY_LEFT)
    assert widget.task_list.selected is None
    assert widget.exit is False


def test_space_toggles_selected_task():
    widget = TaskWidget(make_tasks(2))
    widget.scroll_down()
    widget.handle_key(" ")
    assert widget.task_list.items[0].done is True
    assert widget.task_list.items[1].done is False
    toggled = widget.toggle()
    assert toggled is widget.task_list.items[0]
    assert toggled.done is False


def test_toggle_without_selection_returns_none():
    widget = TaskWidget(make_tasks(1))
    assert widget.toggle() is None
    assert widget.task_list.items[0].done is False


def test_render_draws_title_and_marks_selection():
    widget = TaskWidget(make_tasks(2))
    widget.scroll_down()
    window = FakeWindow(20, 40)
    widget.render(window)
    assert TITLE in window.rows[0][0]
    assert window.rows[1][0] == HIGHLIGHT_SYMBOL + "2025-03-12"
    assert window.rows[2][0].strip() == SEPARATOR
    unselected = [text for text, _ in window.rows.values() if text.strip() == "Task 1"]
    assert unselected == [" " * len(HIGHLIGHT_SYMBOL) + "Task 1"]


def test_render_scrolls_to_selected_task():
    widget = TaskWidget(make_tasks(6))
    widget.scroll_up()
    window = FakeWindow(5, 40)
    widget.render(window)
    texts = [text for text, _ in window.rows.values()]
    assert len(window.rows) <= 5
    assert any(text.startswith(HIGHLIGHT_SYMBOL) for text in texts)
    assert any(text.strip() == "Task 5" for text in texts)


def test_render_skips_too_narrow_window():
    widget = TaskWidget(make_tasks(1))
    window = FakeWindow(10, 1)
    widget.render(window)
    assert window.rows == {}


def test_widget_loads_tasks_from_database(tmp_path):
    conn = connect(tmp_path / "tasks.db")
    migrate(conn)
    insert_task(conn, Task(date(2025, 3, 12), "Test content"))
    from kondo.database import list_all

    widget = TaskWidget(list_all(conn))
    conn.close()
    assert [task.content for task in widget.task_list.items] == ["Test content"]


def test_open_task_editor_round_trip():
    seen = {}

    def fake_editor(cmd, **kwargs):
        path = Path(cmd[1])
        seen["editor"] = cmd[0]
        seen["path"] = path
        seen["before"] = path.read_text(encoding="utf-8")
        path.write_text("[2025-03-31]\nThis is a test task.\n", encoding="utf-8")
        return subprocess.CompletedProcess(cmd, 0)

    task = Task(date(2025, 3, 12), "Test content")
    with mock.patch("subprocess.run", side_effect=fake_editor):
        result = open_task_editor(task, "vim")

    assert seen["editor"] == "vim"
    assert seen["before"] == "[2025-03-12]\nTest content"
    assert result == Task(date(2025, 3, 31), "This is a test task.")
    assert not seen["path"].exists()


def test_open_task_editor_unchanged_file_returns_same_task():
    task = Task(date(2025, 3, 12), "Test content")
    with mock.patch("subprocess.run", return_value=None):
        result = open_task_editor(task, "vim")
    assert result == task


def test_open_task_editor_rejects_bad_text():
    def fake_editor(cmd, **kwargs):
        Path(cmd[1]).write_text("no date here", encoding="utf-8")
        return subprocess.CompletedProcess(cmd, 0)

    with mock.patch("subprocess.run", side_effect=fake_editor):
        with pytest.raises(TaskParseError):
            open_task_editor(Task(date(2025, 3, 12), "Test content"), "vim")