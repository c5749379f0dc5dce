[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cantdo"
version = "0.1.0"
description = "A small terminal to-do manager with view, edit and create panes, backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "terminal", "tui", "curses", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cantdo = "cantdo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cantdo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
