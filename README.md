# cantdo

cantdo is a small to-do manager for the terminal. It has three panes:

- **View Todos**: browse the list, mark entries and toggle their status.
- **Edit Todos**: change the title and description of any entry.
- **Create Todos**: add a new entry with a title and a description.

Entries are stored in a SQLite database. Errors from inserting entries, such as
a duplicate title, are appended to an error log.

## Installing

```
pip install .
```

The interface uses the standard `curses` module, so it needs a Unix-like
terminal.

## Running

```
cantdo
```

| Option              | Default     | Meaning                          |
|---------------------|-------------|----------------------------------|
| `--db PATH`         | `todo.db`   | database file                    |
| `--error-log PATH`  | `error.txt` | file that insert errors go to    |

Relative paths are taken from the directory you start the program in.

## Keys

| Key              | Where        | What it does                                           |
|------------------|--------------|--------------------------------------------------------|
| left/right       | anywhere     | switch pane                                            |
| up/down          | any pane     | move the cursor or the focused field (needs entries)   |
| tab              | View         | mark or unmark the entry under the cursor              |
| tab              | Create       | move to the other field                                |
| enter            | View         | toggle the status of every marked entry                |
| enter            | Edit         | save every changed title and description               |
| enter            | Create       | on the description field, add the new entry            |
| typing, space, backspace | Edit, Create | edit the focused field                         |
| q                | View         | quit                                                   |
| ctrl+x           | anywhere     | delete all data                                        |
| ctrl+c           | anywhere     | quit                                                   |

Notes on behaviour:

- A title is cut off at 32 characters and a description at 128. Titles must
  be unique; a duplicate is not added and the error is written to the error log.
- Creating an entry needs both a title and a description (surrounding spaces are
  trimmed).
- Saving in the Edit pane rewrites the whole list, so every entry is stored
  again with status pending.
- When an entry's status becomes complete, it is removed from the list one hour
  later, provided the program is still running then.

## Using the database directly

```python
from cantdo.db import ListTodo, Status, TodoDB

with TodoDB("todo.db", "error.txt") as db:
    db.create_todo(ListTodo("Water the plants", "Both balconies", Status.PENDING))
    for todo in db.read_todos():
        print(todo.title, todo.status)
```

`TodoDB` offers `create_todo`, `read_todos`, `update_status` (toggle pending and
complete), `update_todos` (replace all entries), `delete_queue` (remove an entry
by title after a sleeper returns), `flush` (drop everything) and `close`.

The panes can also be driven without a terminal: `cantdo.panes.PaneModel` takes
key names such as `"down"` or `"enter"` through `handle_key`, and `body()`,
`header(width)` and `footer(width)` return its text.

## Running the tests

```
pip install ".[test]"
pytest
```