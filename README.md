# kondo

A small task keeper for the terminal. Every task has a deadline and a free-form
text body. Tasks are stored in a local SQLite database, `kondo.db` in the
current directory. You can add them from the command line or write them in
your editor, and you can browse them in a full-screen list.

## Installation

```
pip install .
```

The list view uses the standard `curses` module, so it needs a POSIX terminal.

## Usage

Every command first makes sure the database table exists and prints
`Database setup complete.`

### Adding a task

Give a deadline and content:

```
kondo add --date 2025-03-31 --content "Send the quarterly report"
```

The short forms are `-d` and `-c`. The date on the command line must be written
as `YYYY-MM-DD`. If only one of `--date` and `--content` is given, nothing is
stored.

Run `add` with no options to write the task in your editor. The deadline is
filled in as today (UTC) plus the configured number of days:

```
kondo add
```

The file the editor opens looks like this:

```
[2025-03-31]
Send the quarterly report
```

The first line is the deadline in brackets, written as `YYYY-MM-DD` or
`YYYY/MM/DD` (either separator may be used). Whitespace before the tag is
ignored; everything after it, trimmed, is the task's content. When the editor
exits, the file is parsed and the task is stored.

### Editing a task file

```
kondo edit --file-name task.txt
```

Reads a task written in the format above from the given file, opens it in your
editor, and writes the edited task back to the same file. The database is not
changed.

### Browsing tasks

```
kondo list
```

Shows every stored task: its deadline, a separator line and its content. Use
the Up and Down arrows to move the selection, Space to flip the selected
task's done flag on screen, and Esc to leave.

`kondo --version` prints the version.

## Configuration

On first run kondo writes a default configuration to
`~/.config/kondo/kondo.toml`:

```
[kondo]
# Default deadline in days from now.
default_deadline = 7
editor = "vim"
```

`default_deadline` must be a whole number of days. Either setting can be
overridden with an environment variable named `KONDO_` plus the setting's name
in upper case, for example `KONDO_EDITOR=nano` or `KONDO_DEFAULT_DEADLINE=3`.

## Library use

The modules can also be used on their own:

- `kondo.task.Task` is the task record: `deadline`, `content`, `id`,
  `category` and `done`.
- `kondo.content_parser.parse_task` turns editor text into a `Task` and raises
  `TaskParseError` (a `ValueError`) when the text is malformed.
- `kondo.database.connect`, `migrate`, `insert_task` and `list_all` manage the
  task store.
- `kondo.config.load_configuration` reads the settings file, with optional
  `config_path` and `environ` arguments.
- `kondo.list_ui.open_task_editor` edits a task in a given editor command and
  returns the parsed result.
- `kondo.cli.add` stores a task the same way the `add` command does.

## What it does not do

- Flipping a task's done flag in the list is not saved; the database keeps
  every task as not done.
- Stored tasks cannot be changed or deleted; `edit` works only on a file.
- A task's category cannot be set.