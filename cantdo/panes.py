"""Pane state, key handling and text rendering for the to-do interface."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from .db import ListTodo, TodoDB

SUBMIT_BUTTON = "[ Submit ]"
VIEW_EMPTY_HINT = "Go to create pane to create a new todo."
EDIT_EMPTY_HINT = "Edit pane empty, please add some todos in the create pane."

_TAB_GAP = "    "


class Pane(IntEnum):
    """The three panes, in tab order."""

    VIEW = 0
    EDIT = 1
    CREATE = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def hint(self) -> str:
        return _HINTS[self]


_LABELS = {
    Pane.VIEW: "View Todos",
    Pane.EDIT: "Edit Todos",
    Pane.CREATE: "Create Todos",
}

_HINTS = {
    Pane.VIEW: "tab: select | enter: update status",
    Pane.EDIT: "arrow keys: move around | enter: submit",
    Pane.CREATE: "tab: next field | enter: submit",
}


class TextInput:
    """A single-line text field with a prompt, placeholder and length limit."""

    def __init__(
        self,
        prompt: str,
        placeholder: str = "",
        char_limit: int = 0,
        width: int = 0,
    ) -> None:
        self.prompt = prompt
        self.placeholder = placeholder
        self.char_limit = char_limit
        self.width = width
        self.value = ""
        self.focused = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def insert(self, text: str) -> None:
        """Append text, dropping whatever goes past the character limit."""
        if self.char_limit > 0:
            text = text[: max(0, self.char_limit - len(self.value))]
        self.value += text

    def backspace(self) -> None:
        self.value = self.value[:-1]

    @property
    def visible_value(self) -> str:
        """The tail of the value that fits in the field's width."""
        if self.width > 0:
            return self.value[-self.width:]
        return self.value

    def view(self) -> str:
        return self.prompt + (self.visible_value if self.value else self.placeholder)


def make_edit_inputs(todos: Iterable[ListTodo]) -> list[list[TextInput]]:
    """Build a title and description field per item; the first field gets focus."""
    inputs = [
        [
            TextInput("Edit Title: ", todo.title, char_limit=32, width=128),
            TextInput("Edit Description: ", todo.description, char_limit=128, width=160),
        ]
        for todo in todos
    ]
    if inputs:
        inputs[0][0].focus()
    return inputs


class PaneModel:
    """State of the three panes and the reaction to each key press."""

    def __init__(self, db: TodoDB, todos: Iterable[ListTodo] = ()) -> None:
        self.db = db
        for todo in todos:
            db.create_todo(todo)
        self.todos: list[ListTodo] = db.read_todos()
        self.focus = Pane.VIEW

        self.view_cursor = 0
        self.selected: set[int] = set()

        self.edit_inputs = make_edit_inputs(self.todos)
        self.edit_todo = 0
        self.edit_field = 0
        self.edit_submit_ready = False

        self.create_inputs = [
            TextInput("Title: ", "Title", char_limit=32, width=44),
            TextInput("Description: ", "Description", char_limit=128, width=160),
        ]
        self.create_inputs[0].focus()
        self.create_cursor = 0

    @property
    def _edit_current(self) -> TextInput:
        return self.edit_inputs[self.edit_todo][self.edit_field]

    def handle_key(self, key: str) -> bool:
        """Apply one key press; return True when the program should quit."""
        if key == "ctrl+x":
            self.db.flush()
            return False
        if key == "ctrl+c":
            return True
        if key == "q" and self.focus is Pane.VIEW:
            self.db.close()
            return True
        if key == "left":
            self.focus = Pane((self.focus - 1) % len(Pane))
            return False
        if key == "right":
            self.focus = Pane((self.focus + 1) % len(Pane))
            return False

        if key == "down":
            if self.todos:
                self._move_down()
        elif key == "up":
            if self.todos:
                self._move_up()
        elif key == "enter":
            if self.focus is Pane.CREATE and self.create_cursor == len(self.create_inputs) - 1:
                self._submit_create()
                return False
            if self.focus is Pane.EDIT:
                self._submit_edits()
            elif self.focus is Pane.VIEW:
                self._apply_selection()
                return False
        elif key == "tab":
            if self.focus is Pane.CREATE:
                self._cycle_create()
            elif self.focus is Pane.VIEW:
                self.selected ^= {self.view_cursor}

        self._feed_inputs(key)
        return False

    def _cycle_create(self) -> None:
        self.create_inputs[self.create_cursor].blur()
        self.create_cursor = (self.create_cursor + 1) % len(self.create_inputs)
        self.create_inputs[self.create_cursor].focus()

    def _move_down(self) -> None:
        if self.focus is Pane.CREATE:
            self._cycle_create()
        elif self.focus is Pane.EDIT:
            last = len(self.edit_inputs) - 1
            if last < 0:
                return
            if self.edit_todo < last or (self.edit_todo == last and self.edit_field == 0):
                self._edit_current.blur()
                if self.edit_field == 1:
                    self.edit_todo += 1
                self.edit_field = (self.edit_field + 1) % 2
                self._edit_current.focus()
        elif self.view_cursor < len(self.todos) - 1:
            self.view_cursor += 1

    def _move_up(self) -> None:
        if self.focus is Pane.CREATE:
            self._cycle_create()
        elif self.focus is Pane.EDIT:
            if not self.edit_inputs:
                return
            if self.edit_todo > 0 or self.edit_field == 1:
                self._edit_current.blur()
                if self.edit_field == 0:
                    self.edit_todo -= 1
                self.edit_field = (self.edit_field + 1) % 2
                self._edit_current.focus()
        elif self.view_cursor > 0:
            self.view_cursor -= 1

    def _submit_create(self) -> None:
        title = self.create_inputs[0].value.strip()
        description = self.create_inputs[1].value.strip()
        if title and description:
            self.db.create_todo(ListTodo(title, description))
            self.todos = self.db.read_todos()
            for field in self.create_inputs:
                field.value = ""
            self.create_cursor = 0
            self.create_inputs[0].focus()
            self.create_inputs[1].blur()
        self.edit_submit_ready = False
        self.edit_inputs = make_edit_inputs(self.todos)
        self.edit_todo = 0
        self.edit_field = 0

    def _submit_edits(self) -> None:
        self.edit_submit_ready = False
        for (title_input, desc_input), todo in zip(self.edit_inputs, self.todos):
            if title_input.value:
                todo.title = title_input.value
            if desc_input.value:
                todo.description = desc_input.value
        if self.edit_inputs:
            self._edit_current.blur()
            self.edit_todo = 0
            self.edit_field = 0
            self.edit_inputs[0][0].focus()
        self.db.update_todos(self.todos)

    def _apply_selection(self) -> None:
        for index, todo in enumerate(self.todos):
            if index in self.selected:
                self.db.update_status(todo)
        self.todos = self.db.read_todos()

    def _feed_inputs(self, key: str) -> None:
        target: TextInput | None = None
        if self.focus is Pane.CREATE:
            target = self.create_inputs[self.create_cursor]
        elif self.focus is Pane.EDIT and self.edit_inputs:
            target = self._edit_current
        if target is not None:
            if key == "backspace":
                target.backspace()
            elif key == "space":
                target.insert(" ")
            elif len(key) == 1 and key.isprintable():
                target.insert(key)
        if self.edit_inputs:
            self.edit_submit_ready = True

    def body(self) -> str:
        """Plain text of the focused pane."""
        if self.focus is Pane.VIEW:
            prefix = VIEW_EMPTY_HINT + "\n" if not self.todos else ""
            entries = []
            for index, todo in enumerate(self.todos):
                cursor = "> " if index == self.view_cursor else "  "
                checked = "[x]" if index in self.selected else "[ ]"
                entries.append(
                    f"{cursor}{checked} {todo.title} → {todo.description}\n"
                    f"      Status: {int(todo.status)}"
                )
            return prefix + "\n\n".join(entries)

        if self.focus is Pane.EDIT:
            parts = []
            if not self.edit_inputs:
                parts.append(EDIT_EMPTY_HINT + "\n\n")
            for number, (title_input, desc_input) in enumerate(self.edit_inputs, start=1):
                index = f"{number:3d}. "
                parts.append(f"{index}{title_input.view()}\n")
                parts.append(f"{' ' * len(index)}{desc_input.view()}\n\n")
            parts.append(SUBMIT_BUTTON)
            return "".join(parts)

        return "".join(f"{field.view()}\n\n" for field in self.create_inputs) + SUBMIT_BUTTON

    def header(self, width: int) -> str:
        """Boxed tab bar followed by a rule out to the given width."""
        title = _TAB_GAP.join(pane.label for pane in Pane)
        inner = len(title)
        rule = "─" * max(0, width - (inner + 2))
        return "\n".join(
            [
                "╭" + "─" * inner + "╮",
                "│" + title + "├" + rule,
                "╰" + "─" * inner + "╯",
            ]
        )

    def footer(self, width: int) -> str:
        """Rule from the left edge followed by a boxed key summary."""
        text = f"ctrl+c: Quit{_TAB_GAP}ctrl+x: Flush Data{_TAB_GAP}{self.focus.hint}"
        inner = len(text)
        pad = max(0, width - (inner + 2))
        return "\n".join(
            [
                " " * pad + "╭" + "─" * inner + "╮",
                "─" * pad + "┤" + text + "│",
                " " * pad + "╰" + "─" * inner + "╯",
            ]
        )

    def cursor_position(self) -> tuple[int, int] | None:
        """Row and column in body() where the focused field's cursor sits."""
        if self.focus is Pane.CREATE:
            field = self.create_inputs[self.create_cursor]
            return 2 * self.create_cursor, len(field.prompt) + len(field.visible_value)
        if self.focus is Pane.EDIT and self.edit_inputs:
            field = self._edit_current
            index_width = len(f"{self.edit_todo + 1:3d}. ")
            return (
                3 * self.edit_todo + self.edit_field,
                index_width + len(field.prompt) + len(field.visible_value),
            )
        return None