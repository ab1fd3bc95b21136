[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kondo"
version = "0.1.0a1"
description = "A small terminal task keeper with deadlines, stored in SQLite and written in your editor."
requires-python = ">=3.11"
dependencies = []
keywords = ["tasks", "todo", "deadlines", "terminal", "sqlite", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kondo = "kondo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kondo"]

[tool.pytest.ini_options]
addopts = "-ra"
