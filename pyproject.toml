[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tysp"
version = "0.1.0"
description = "A tiny plain-text spreadsheet reader that lays out pipe-separated cells as aligned columns"
requires-python = ">=3.10"
dependencies = []
keywords = ["spreadsheet", "table", "text", "cli", "cells", "argv", "flags"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Spreadsheet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tysp = "tysp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tysp"]

[tool.pytest.ini_options]
addopts = "-ra"
