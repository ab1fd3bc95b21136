"""Terminal task keeper with deadlines, stored in SQLite and written in an editor."""

__version__ = "0.1.0a1"