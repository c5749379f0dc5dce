"""Curses front end for the to-do panes."""

from __future__ import annotations

import argparse
import curses

from .db import DEFAULT_DB_PATH, DEFAULT_ERROR_LOG, TodoDB
from .panes import PaneModel

_PAD = 2

_SPECIAL_KEYS = {
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_ENTER: "enter",
    curses.KEY_BACKSPACE: "backspace",
}

_CONTROL_KEYS = {
    "\n": "enter",
    "\r": "enter",
    "\t": "tab",
    "\x03": "ctrl+c",
    "\x18": "ctrl+x",
    "\x7f": "backspace",
    "\x08": "backspace",
    " ": "space",
}


def translate_key(code: int | str) -> str | None:
    """Turn a curses key code or character into a key name, or None."""
    if isinstance(code, int):
        if code in _SPECIAL_KEYS:
            return _SPECIAL_KEYS[code]
        if not 0 <= code < 256:
            return None
        code = chr(code)
    if code in _CONTROL_KEYS:
        return _CONTROL_KEYS[code]
    if len(code) == 1 and code.isprintable():
        return code
    return None


def compose_screen(
    model: PaneModel, width: int, height: int
) -> tuple[list[str], tuple[int, int] | None]:
    """Lay out header, framed body and footer; return the lines and cursor cell."""
    header = model.header(width).splitlines()
    footer = model.footer(width).splitlines()
    body_height = max(0, height - len(header) - len(footer))
    inner = max(0, width - 2)
    text_width = max(0, inner - 2 * _PAD)

    content = [""] + model.body().split("\n") + [""]
    rows = (content + [""] * body_height)[:body_height]
    framed = [
        "│" + (" " * _PAD + row[:text_width]).ljust(inner)[:inner] + "│" for row in rows
    ]
    lines = [line[:width] for line in header + framed + footer][:height]

    cursor = None
    position = model.cursor_position()
    if position is not None:
        row, col = position
        y = len(header) + 1 + row
        x = 1 + _PAD + col
        if 1 + row < body_height and col <= text_width and x < width:
            cursor = (y, x)
    return lines, cursor


def run(stdscr, model: PaneModel) -> None:
    """Draw the model and feed it keys until it asks to quit."""
    for setup in (lambda: curses.curs_set(1), curses.raw):
        try:
            setup()
        except curses.error:
            pass
    stdscr.keypad(True)

    while True:
        height, width = stdscr.getmaxyx()
        lines, cursor = compose_screen(model, width, height)
        stdscr.erase()
        for y, line in enumerate(lines):
            try:
                stdscr.addstr(y, 0, line)
            except curses.error:
                pass
        if len(lines) > 1:
            label = model.focus.label
            x = lines[1].find(label)
            if x >= 0:
                try:
                    stdscr.addstr(1, x, label, curses.A_REVERSE)
                except curses.error:
                    pass
        if cursor is not None:
            try:
                stdscr.move(*cursor)
            except curses.error:
                pass
        stdscr.refresh()

        key = translate_key(stdscr.get_wch())
        if key is not None and model.handle_key(key):
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cantdo", description="Terminal to-do list.")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="database file")
    parser.add_argument("--error-log", default=DEFAULT_ERROR_LOG, help="error log file")
    args = parser.parse_args(argv)
    with TodoDB(args.db, args.error_log) as db:
        curses.wrapper(run, PaneModel(db))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())