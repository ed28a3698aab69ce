[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "todolist"
version = "0.1.0"
description = "A small command-line to-do list that keeps its tasks in a CSV file."
requires-python = ">=3.10"
keywords = ["todo", "tasks", "csv", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "rich",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
todo = "todolist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["todolist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
