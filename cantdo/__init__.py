"""Terminal to-do manager with view, edit and create panes, stored in SQLite."""

__version__ = "0.1.0"