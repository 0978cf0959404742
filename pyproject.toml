[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoleview"
version = "0.1.0"
description = "View model for an async runtime console: duration formatting, palettes, table navigation, controls, warnings and histograms"
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "async", "tasks", "diagnostics", "tui", "histogram"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["consoleview"]

[tool.pytest.ini_options]
addopts = "-ra"
