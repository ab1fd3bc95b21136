"""Full-screen task list and the external editor used to write tasks."""

from __future__ import annotations

import contextlib
import curses
import os
import sqlite3
import subprocess
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kondo.content_parser import parse_task
from kondo.database import list_all
from kondo.task import Task

TITLE = " [Kondo Tasks] "
SEPARATOR = "---------------------"
HIGHLIGHT_SYMBOL = " > "

_BORDER = "─"
_ESCAPE = 27
_SPACE = ord(" ")


@dataclass
class TaskList:
    """The tasks on screen and which of them is selected."""

    items: list[Task]
    selected: int | None = None

    def select_next(self) -> None:
        """Move the selection one item down, stopping at the last item."""
        if not self.items:
            self.selected = None
            return
        last = len(self.items) - 1
        self.selected = 0 if self.selected is None else min(self.selected + 1, last)

    def select_previous(self) -> None:
        """Move the selection one item up; with nothing selected, pick the last item."""
        if not self.items:
            self.selected = None
            return
        last = len(self.items) - 1
        if self.selected is None:
            self.selected = last
        else:
            self.selected = max(min(self.selected, last) - 1, 0)


@dataclass(frozen=True)
class _Palette:
    header: int = 0
    text: int = 0
    separator: int = 0
    highlight: int = curses.A_REVERSE
    background: int = 0

    @classmethod
    def from_terminal(cls) -> _Palette:
        if not curses.has_colors():
            return cls()
        try:
            curses.start_color()
            curses.init_pair(1, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(2, curses.COLOR_WHITE, curses.COLOR_BLACK)
        except curses.error:
            return cls()
        green = curses.color_pair(1)
        plain = curses.color_pair(2)
        return cls(
            header=green,
            text=plain,
            separator=green,
            highlight=green | curses.A_BOLD,
            background=plain,
        )


def task_item_lines(task: Task) -> list[str]:
    """Return the lines a task occupies in the list: date, separator, content."""
    return [task.deadline.isoformat(), SEPARATOR, *task.content.split("\n")]


def _title_line(width: int) -> str:
    border = _BORDER * width
    start = max(0, (width - len(TITLE)) // 2)
    return (border[:start] + TITLE + border[start + len(TITLE):])[:width]


def _put(window: Any, y: int, text: str, width: int, attr: int) -> None:
    with contextlib.suppress(curses.error):
        window.addnstr(y, 0, text, width, attr)


class TaskWidget:
    """Interactive list of tasks, driven by key presses."""

    def __init__(self, tasks: Iterable[Task]) -> None:
        self.task_list = TaskList(list(tasks))
        self.exit = False
        self._palette = _Palette()

    def handle_key(self, key: int | str) -> None:
        """React to one key: arrows move, space toggles, escape quits."""
        if isinstance(key, str):
            if len(key) != 1:
                return
            key = ord(key)
        if key == curses.KEY_DOWN:
            self.scroll_down()
        elif key == curses.KEY_UP:
            self.scroll_up()
        elif key == _SPACE:
            self.toggle()
        elif key == _ESCAPE:
            self.exit = True

    def scroll_down(self) -> None:
        """Select the next task."""
        self.task_list.select_next()

    def scroll_up(self) -> None:
        """Select the previous task."""
        self.task_list.select_previous()

    def toggle(self) -> Task | None:
        """Flip the done flag of the selected task in memory and return it."""
        selected = self.task_list.selected
        if selected is None:
            return None
        task = self.task_list.items[selected]
        task.done = not task.done
        return task

    def _rows(self) -> list[tuple[int, str, int]]:
        palette = self._palette
        blank = " " * len(HIGHLIGHT_SYMBOL)
        rows: list[tuple[int, str, int]] = []
        for index, task in enumerate(self.task_list.items):
            is_selected = index == self.task_list.selected
            for number, line in enumerate(task_item_lines(task)):
                prefix = HIGHLIGHT_SYMBOL if is_selected and number == 0 else blank
                if is_selected:
                    attr = palette.highlight
                elif number == 1:
                    attr = palette.separator
                else:
                    attr = palette.text
                if number == 0:
                    attr |= curses.A_BOLD
                rows.append((index, prefix + line, attr))
        return rows

    def _scroll_offset(self, rows: list[tuple[int, str, int]], visible: int) -> int:
        selected = self.task_list.selected
        if selected is None or visible <= 0:
            return 0
        positions = [n for n, (index, _, _) in enumerate(rows) if index == selected]
        if not positions:
            return 0
        first, last = positions[0], positions[-1]
        return max(0, min(first, last - visible + 1))

    def render(self, window: Any) -> None:
        """Draw the titled list onto a curses window, keeping the selection visible."""
        height, width = window.getmaxyx()
        window.erase()
        usable = width - 1
        if height <= 0 or usable <= 0:
            return
        _put(window, 0, _title_line(usable), usable, self._palette.header)
        rows = self._rows()
        visible = height - 1
        offset = self._scroll_offset(rows, visible)
        for y, (_, text, attr) in enumerate(rows[offset:offset + visible], start=1):
            _put(window, y, text, usable, attr)

    def _loop(self, screen: Any) -> None:
        with contextlib.suppress(curses.error):
            curses.curs_set(0)
        with contextlib.suppress(curses.error):
            curses.set_escdelay(25)
        screen.keypad(True)
        self._palette = _Palette.from_terminal()
        with contextlib.suppress(curses.error):
            screen.bkgd(" ", self._palette.background)
        while not self.exit:
            self.render(screen)
            screen.refresh()
            self.handle_key(screen.get_wch())


def run(conn: sqlite3.Connection) -> None:
    """Show every stored task in a full-screen list until escape is pressed."""
    widget = TaskWidget(list_all(conn))
    with contextlib.suppress(curses.error):
        curses.wrapper(widget._loop)


def open_task_editor(task: Task, editor: str) -> Task:
    """Let the user edit a task in ``editor`` and return the task parsed from the result."""
    content = f"[{task.deadline.isoformat()}]\n{task.content}"
    fd, name = tempfile.mkstemp(prefix="kondo-", suffix=".txt")
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        subprocess.run([editor, str(path)], check=False)
        updated = path.read_text(encoding="utf-8")
    finally:
        path.unlink(missing_ok=True)
    return parse_task(updated)