[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexatodo"
version = "0.1.0"
description = "A small task manager built around a repository port, with JSON-file and in-memory storage and an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "hexagonal", "repository", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hexatodo = "hexatodo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hexatodo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
