"""The task record shared by the parser, the database and the user interface."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class Task:
    """A single task with a deadline and free-form content.

    A task that has not been stored yet has the id 0.
    """

    deadline: date
    content: str
    id: int = 0
    category: str | None = None
    done: bool = False